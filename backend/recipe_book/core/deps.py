# recipe_book/core/deps.py
# 공용 의존성: 라우터가 쓰는 DB 핸들 주입
from fastapi import Request
from motor.motor_asyncio import AsyncIOMotorDatabase

def get_db(request: Request) -> AsyncIOMotorDatabase:
    # 스타트업에서 app.state.db 에 붙여둔 핸들. 미초기화면 예외 발생
    db = getattr(request.app.state, "db", None)
    if db is None:
        raise RuntimeError("MongoDB is not initialized yet.")
    return db
