# 공용 테스트 픽스처
# - mongomock-motor in-memory DB (motor 와 같은 async API)
# - 의존성 오버라이드된 FastAPI 앱 + httpx AsyncClient

from __future__ import annotations
from typing import Any, Dict

import pytest
from httpx import ASGITransport, AsyncClient
from mongomock_motor import AsyncMongoMockClient

from recipe_book.core.deps import get_db
from recipe_book.main import app

@pytest.fixture
def db():
    return AsyncMongoMockClient()["recipe_book_test"]

@pytest.fixture
async def seeded_db(db):
    # 참조 컬렉션 기본 데이터
    await db["cuisines"].insert_many([{"name": "Chinese"}, {"name": "Japanese"}, {"name": "Mexican"}])
    await db["tags"].insert_many([{"name": "Quick"}, {"name": "Spicy"}, {"name": "Vegetarian"}])
    return db

@pytest.fixture
def recipe_payload() -> Dict[str, Any]:
    return {
        "name": "Mapo Tofu",
        "cuisine": "Chinese",
        "prepTime": 15,
        "cookTime": 20,
        "servings": 4,
        "ingredients": [
            {"name": "Silken Tofu", "quantity": "400g"},
            {"name": "Ground Pork", "quantity": "150g"},
            {"name": "Doubanjiang", "quantity": "2 tbsp"},
        ],
        "instructions": ["Cube the tofu", "Brown the pork", "Simmer with sauce"],
        "tags": ["Spicy", "Quick"],
    }

@pytest.fixture
async def client(seeded_db):
    app.dependency_overrides[get_db] = lambda: seeded_db
    # 500 응답도 예외 대신 응답으로 받는다
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
    app.dependency_overrides.clear()
