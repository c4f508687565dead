# recipe_book/db/init.py
# Mongo 연결 유틸 (motor, on_event용)
# 핸들은 전역에 두지 않고 호출자(main.py)가 app.state 에 붙인다.

from __future__ import annotations
from typing import Tuple

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase

from recipe_book.core.config import Settings

async def init_db(settings: Settings) -> Tuple[AsyncIOMotorClient, AsyncIOMotorDatabase]:
    # 앱 시작 시 1회 호출해서 커넥션 구성
    client = AsyncIOMotorClient(settings.MONGO_URI)
    db = client[settings.MONGO_DB]

    # 연결 확인 (준비 안 됐으면 예외)
    try:
        await db.command("ping")
    except Exception:
        client.close()
        raise
    return client, db

async def close_db(client: AsyncIOMotorClient | None) -> None:
    # 앱 종료 시 커넥션 정리
    if client is not None:
        client.close()
