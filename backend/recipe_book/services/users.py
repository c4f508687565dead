# recipe_book/services/users.py
# 회원가입: 비밀번호는 bcrypt 해시로만 저장

from __future__ import annotations
import asyncio
import logging
from typing import Any, Dict

import bcrypt
from motor.motor_asyncio import AsyncIOMotorDatabase

from recipe_book.db.models.schemas import UserIn
from recipe_book.db.models.user import UserDoc
from recipe_book.exceptions.custom_exceptions import MissingField
from recipe_book.services.store import is_missing, store_op

log = logging.getLogger(__name__)

def hash_password(password: str, rounds: int = 12) -> str:
    salt = bcrypt.gensalt(rounds=rounds)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")

def verify_password(password: str, password_hash: str) -> bool:
    return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))

async def register_user(db: AsyncIOMotorDatabase, payload: UserIn, rounds: int = 12) -> Dict[str, Any]:
    missing = [f for f in ("email", "password") if is_missing(getattr(payload, f))]
    if missing:
        raise MissingField(missing)

    # bcrypt 는 CPU 를 오래 쓰므로 이벤트 루프 밖에서
    password_hash = await asyncio.to_thread(hash_password, payload.password, rounds)
    doc = UserDoc(email=payload.email, passwordHash=password_hash)
    with store_op("insert user"):
        res = await db["users"].insert_one(doc.model_dump())

    log.info("user registered id=%s", res.inserted_id)
    return {"acknowledged": bool(res.acknowledged), "insertedId": str(res.inserted_id)}
