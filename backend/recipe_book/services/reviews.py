# recipe_book/services/reviews.py
# 레시피에 내장된 reviews 배열 조작 (추가/교체/삭제)
# 리뷰는 부모 레시피 없이 존재하지 않는다. 매 작업은 레시피 문서 1건에 대한 원자적 update 한 번.

from __future__ import annotations
import logging
from typing import Any, Dict

from motor.motor_asyncio import AsyncIOMotorDatabase

from recipe_book.db.models.recipe import ReviewDoc
from recipe_book.db.models.schemas import ReviewIn
from recipe_book.exceptions.custom_exceptions import MissingField, NotFound
from recipe_book.services.store import is_missing, parse_object_id, store_op

log = logging.getLogger(__name__)

REQUIRED_FIELDS = ("user", "rating", "comment")

RECIPE_NOT_FOUND = "Recipe not found"
REVIEW_NOT_FOUND = "Review not found"
# 교체는 (레시피 id, 리뷰 id) 복합 매칭 한 번이라 둘을 구분하지 못한다
RECIPE_OR_REVIEW_NOT_FOUND = "Recipe or review not found"

def _review_document(payload: ReviewIn, **kwargs: Any) -> Dict[str, Any]:
    missing = [f for f in REQUIRED_FIELDS if is_missing(getattr(payload, f))]
    if missing:
        raise MissingField(missing)
    return ReviewDoc(
        user=payload.user,
        rating=payload.rating,
        comment=payload.comment,
        **kwargs,
    ).model_dump()

async def add_review(db: AsyncIOMotorDatabase, recipe_id: str, payload: ReviewIn) -> str:
    """새 reviewId/날짜를 붙여 배열 끝에 추가. 생성된 reviewId 반환"""
    review = _review_document(payload)

    oid = parse_object_id(recipe_id)
    if oid is None:
        raise NotFound(RECIPE_NOT_FOUND)

    with store_op("add review"):
        res = await db["recipes"].update_one({"_id": oid}, {"$push": {"reviews": review}})
    if res.matched_count == 0:
        raise NotFound(RECIPE_NOT_FOUND)

    log.info("review added recipe=%s review=%s", recipe_id, review["reviewId"])
    return review["reviewId"]

async def replace_review(
    db: AsyncIOMotorDatabase,
    recipe_id: str,
    review_id: str,
    payload: ReviewIn,
) -> str:
    """
    매칭된 배열 원소를 통째로 교체. reviewId 는 경로 값 그대로, 날짜는 지금으로 다시 찍는다.
    레시피가 없거나 리뷰가 없으면 같은 NotFound 하나로 보고한다.
    """
    review = _review_document(payload, reviewId=review_id)

    oid = parse_object_id(recipe_id)
    if oid is None:
        raise NotFound(RECIPE_OR_REVIEW_NOT_FOUND)

    with store_op("replace review"):
        res = await db["recipes"].update_one(
            {"_id": oid, "reviews.reviewId": review_id},
            {"$set": {"reviews.$": review}},
        )
    if res.matched_count == 0:
        raise NotFound(RECIPE_OR_REVIEW_NOT_FOUND)
    return review_id

async def remove_review(db: AsyncIOMotorDatabase, recipe_id: str, review_id: str) -> None:
    """레시피 없음 / 리뷰 없음을 서로 다른 NotFound 로 구분한다."""
    oid = parse_object_id(recipe_id)
    if oid is None:
        raise NotFound(RECIPE_NOT_FOUND)

    with store_op("remove review"):
        res = await db["recipes"].update_one(
            {"_id": oid},
            {"$pull": {"reviews": {"reviewId": review_id}}},
        )
    if res.matched_count == 0:
        raise NotFound(RECIPE_NOT_FOUND)
    if res.modified_count == 0:
        raise NotFound(REVIEW_NOT_FOUND)
    log.info("review removed recipe=%s review=%s", recipe_id, review_id)
