"""레시피 내장 리뷰 배열 추가/교체/삭제 테스트"""

from __future__ import annotations

import asyncio
from datetime import datetime
from unittest.mock import AsyncMock, MagicMock

import pytest
from bson import ObjectId
from pymongo.errors import NetworkTimeout

from recipe_book.db.models.schemas import RecipeIn, ReviewIn
from recipe_book.exceptions.custom_exceptions import MissingField, NotFound, StoreFailure
from recipe_book.services import recipes as recipe_svc
from recipe_book.services import reviews as svc

@pytest.fixture
async def recipe_id(seeded_db, recipe_payload) -> str:
    return await recipe_svc.create_recipe(seeded_db, RecipeIn(**recipe_payload))

def _review(**overrides) -> ReviewIn:
    data = {"user": "kim", "rating": 4, "comment": "Nice and spicy"}
    data.update(overrides)
    return ReviewIn(**data)

async def _reviews(db, recipe_id):
    doc = await recipe_svc.get_recipe(db, recipe_id)
    return doc["reviews"]

class TestAddReview:
    async def test_appends_with_generated_id_and_date(self, seeded_db, recipe_id) -> None:
        review_id = await svc.add_review(seeded_db, recipe_id, _review())

        reviews = await _reviews(seeded_db, recipe_id)
        assert len(reviews) == 1
        assert reviews[0]["reviewId"] == review_id
        assert ObjectId.is_valid(review_id)
        assert reviews[0]["user"] == "kim"
        assert reviews[0]["rating"] == 4
        assert isinstance(reviews[0]["date"], datetime)

    async def test_preserves_append_order(self, seeded_db, recipe_id) -> None:
        first = await svc.add_review(seeded_db, recipe_id, _review(user="first"))
        second = await svc.add_review(seeded_db, recipe_id, _review(user="second"))

        reviews = await _reviews(seeded_db, recipe_id)
        assert [r["reviewId"] for r in reviews] == [first, second]
        assert first != second

    @pytest.mark.parametrize("field", ["user", "rating", "comment"])
    async def test_missing_field(self, seeded_db, recipe_id, field) -> None:
        with pytest.raises(MissingField):
            await svc.add_review(seeded_db, recipe_id, _review(**{field: None}))
        assert await _reviews(seeded_db, recipe_id) == []

    async def test_zero_rating_is_accepted(self, seeded_db, recipe_id) -> None:
        await svc.add_review(seeded_db, recipe_id, _review(rating=0))
        assert (await _reviews(seeded_db, recipe_id))[0]["rating"] == 0

    async def test_unknown_recipe(self, seeded_db) -> None:
        with pytest.raises(NotFound, match="Recipe not found"):
            await svc.add_review(seeded_db, str(ObjectId()), _review())

class TestReplaceReview:
    async def test_replaces_entry_in_place(self, seeded_db, recipe_id) -> None:
        first = await svc.add_review(seeded_db, recipe_id, _review(user="a"))
        second = await svc.add_review(seeded_db, recipe_id, _review(user="b"))

        echoed = await svc.replace_review(
            seeded_db, recipe_id, first, _review(user="a2", rating=1, comment="changed my mind")
        )

        assert echoed == first
        reviews = await _reviews(seeded_db, recipe_id)
        assert [r["reviewId"] for r in reviews] == [first, second]
        assert reviews[0]["user"] == "a2"
        assert reviews[0]["rating"] == 1
        assert reviews[0]["comment"] == "changed my mind"
        assert "date" in reviews[0]
        assert reviews[1]["user"] == "b"

    async def test_replace_restamps_date(self, seeded_db, recipe_id) -> None:
        review_id = await svc.add_review(seeded_db, recipe_id, _review())
        before = (await _reviews(seeded_db, recipe_id))[0]["date"]

        # 저장 정밀도(ms)보다 충분히 기다린다
        await asyncio.sleep(0.02)
        await svc.replace_review(seeded_db, recipe_id, review_id, _review(comment="edited"))

        after = (await _reviews(seeded_db, recipe_id))[0]["date"]
        assert after > before

    async def test_missing_field(self, seeded_db, recipe_id) -> None:
        review_id = await svc.add_review(seeded_db, recipe_id, _review())
        with pytest.raises(MissingField):
            await svc.replace_review(seeded_db, recipe_id, review_id, _review(comment=""))

    async def test_unknown_review_and_unknown_recipe_are_the_same_outcome(
        self, seeded_db, recipe_id
    ) -> None:
        review_id = await svc.add_review(seeded_db, recipe_id, _review())

        with pytest.raises(NotFound) as missing_review:
            await svc.replace_review(seeded_db, recipe_id, str(ObjectId()), _review())
        with pytest.raises(NotFound) as missing_recipe:
            await svc.replace_review(seeded_db, str(ObjectId()), review_id, _review())

        assert missing_review.value.message == missing_recipe.value.message

class TestRemoveReview:
    async def test_removes_only_matching_entry(self, seeded_db, recipe_id) -> None:
        first = await svc.add_review(seeded_db, recipe_id, _review(user="a"))
        second = await svc.add_review(seeded_db, recipe_id, _review(user="b"))

        await svc.remove_review(seeded_db, recipe_id, first)

        reviews = await _reviews(seeded_db, recipe_id)
        assert [r["reviewId"] for r in reviews] == [second]

    async def test_unknown_review_on_existing_recipe(self, seeded_db, recipe_id) -> None:
        with pytest.raises(NotFound, match="Review not found"):
            await svc.remove_review(seeded_db, recipe_id, str(ObjectId()))

    async def test_unknown_recipe(self, seeded_db) -> None:
        with pytest.raises(NotFound, match="Recipe not found"):
            await svc.remove_review(seeded_db, str(ObjectId()), str(ObjectId()))

    async def test_second_removal_reports_missing_review(self, seeded_db, recipe_id) -> None:
        review_id = await svc.add_review(seeded_db, recipe_id, _review())
        await svc.remove_review(seeded_db, recipe_id, review_id)

        with pytest.raises(NotFound, match="Review not found"):
            await svc.remove_review(seeded_db, recipe_id, review_id)

    async def test_store_failure(self) -> None:
        db = MagicMock()
        db["recipes"].update_one = AsyncMock(side_effect=NetworkTimeout("slow"))

        with pytest.raises(StoreFailure):
            await svc.remove_review(db, str(ObjectId()), "r1")
