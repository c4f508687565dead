# recipe_book/api/routes_users.py
# 회원가입 (세션/로그인 없음)

from fastapi import APIRouter, Depends

from recipe_book.core.config import settings
from recipe_book.core.deps import get_db
from recipe_book.db.models.schemas import UserIn
from recipe_book.services.users import register_user

router = APIRouter(prefix="/users", tags=["users"])

@router.post("")
async def create_user(payload: UserIn, db=Depends(get_db)):
    result = await register_user(db, payload, rounds=settings.BCRYPT_ROUNDS)
    return {"message": "User registered successfully", "result": result}
