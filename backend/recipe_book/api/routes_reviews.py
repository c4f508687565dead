# recipe_book/api/routes_reviews.py
# 레시피 하위 리소스: 리뷰 추가/교체/삭제

from fastapi import APIRouter, Depends, status

from recipe_book.core.deps import get_db
from recipe_book.db.models.schemas import ReviewIn
from recipe_book.services import reviews as svc

router = APIRouter(prefix="/recipes/{recipe_id}/reviews", tags=["reviews"])

@router.post("", status_code=status.HTTP_201_CREATED)
async def add_review(recipe_id: str, payload: ReviewIn, db=Depends(get_db)):
    review_id = await svc.add_review(db, recipe_id, payload)
    return {"message": "Review added successfully", "reviewId": review_id}

@router.put("/{review_id}")
async def replace_review(recipe_id: str, review_id: str, payload: ReviewIn, db=Depends(get_db)):
    review_id = await svc.replace_review(db, recipe_id, review_id, payload)
    return {"message": "Review updated successfully", "reviewId": review_id}

@router.delete("/{review_id}")
async def remove_review(recipe_id: str, review_id: str, db=Depends(get_db)):
    await svc.remove_review(db, recipe_id, review_id)
    return {"message": "Review deleted successfully"}
