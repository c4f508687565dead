# recipe_book/services/recipes.py
# 레시피 CRUD. 요청 입력 → 저장 문서 변환 규칙(생성/전체교체 공용)과 목록 필터

from __future__ import annotations
import logging
import re
from typing import Any, Dict, List, Optional

from motor.motor_asyncio import AsyncIOMotorDatabase

from recipe_book.db.models.schemas import RecipeIn
from recipe_book.exceptions.custom_exceptions import MissingField, NotFound
from recipe_book.services.references import resolve_references
from recipe_book.services.store import is_missing, parse_object_id, store_op

log = logging.getLogger(__name__)

REQUIRED_FIELDS = ("name", "cuisine", "ingredients", "instructions", "tags")
OPTIONAL_FIELDS = ("prepTime", "cookTime", "servings")

# 목록은 카드용 최소 필드만, 상세는 최상위 _id 만 뺀다
LIST_PROJECTION = {"_id": 0, "name": 1, "cuisine": 1, "tags": 1, "prepTime": 1}
DETAIL_PROJECTION = {"_id": 0}

RECIPE_NOT_FOUND = "Recipe not found"

# ------------------------------
# 입력 → 문서
# ------------------------------

async def build_recipe_document(db: AsyncIOMotorDatabase, payload: RecipeIn) -> Dict[str, Any]:
    """
    생성/전체교체 공용 문서 빌더.
    필수 필드 누락 → MissingField, cuisine/tag 이름 오류 → InvalidReference.
    prepTime/cookTime/servings 는 입력에 있을 때만 그대로 복사한다.
    reviews 는 여기서 다루지 않는다.
    """
    missing = [f for f in REQUIRED_FIELDS if is_missing(getattr(payload, f))]
    if missing:
        raise MissingField(missing)

    refs = await resolve_references(db, payload.cuisine, payload.tags)

    doc: Dict[str, Any] = {"name": payload.name, "cuisine": refs["cuisine"]}
    for f in OPTIONAL_FIELDS:
        if f in payload.model_fields_set:
            doc[f] = getattr(payload, f)
    doc["ingredients"] = payload.ingredients
    doc["instructions"] = payload.instructions
    doc["tags"] = refs["tags"]
    return doc

# ------------------------------
# 목록 필터
# ------------------------------

def _split_csv(value: Optional[str]) -> List[str]:
    return [s.strip() for s in (value or "").split(",") if s.strip()]

def _contains(text: str) -> Dict[str, str]:
    # 대소문자 무시 부분일치. 사용자 입력은 정규식으로 해석하지 않는다
    return {"$regex": re.escape(text), "$options": "i"}

def build_list_filter(
    tags: Optional[str] = None,
    cuisine: Optional[str] = None,
    ingredients: Optional[str] = None,
    name: Optional[str] = None,
) -> Dict[str, Any]:
    """모든 조건은 선택이며 AND 로 묶인다."""
    criteria: Dict[str, Any] = {}

    tag_names = _split_csv(tags)
    if tag_names:
        # 태그 이름 중 하나라도 가지고 있으면 통과
        criteria["tags.name"] = {"$in": tag_names}

    if cuisine and cuisine.strip():
        criteria["cuisine.name"] = _contains(cuisine.strip())

    terms = _split_csv(ingredients)
    if terms:
        # 재료는 각 검색어가 모두 어떤 재료 이름엔가 걸려야 한다
        criteria["$and"] = [{"ingredients.name": _contains(t)} for t in terms]

    if name and name.strip():
        criteria["name"] = _contains(name.strip())

    return criteria

# ------------------------------
# CRUD
# ------------------------------

async def list_recipes(
    db: AsyncIOMotorDatabase,
    tags: Optional[str] = None,
    cuisine: Optional[str] = None,
    ingredients: Optional[str] = None,
    name: Optional[str] = None,
) -> List[Dict[str, Any]]:
    query = build_list_filter(tags=tags, cuisine=cuisine, ingredients=ingredients, name=name)
    with store_op("list recipes"):
        cur = db["recipes"].find(query, LIST_PROJECTION)
        return await cur.to_list(length=None)

async def get_recipe(db: AsyncIOMotorDatabase, recipe_id: str) -> Dict[str, Any]:
    oid = parse_object_id(recipe_id)
    if oid is None:
        raise NotFound(RECIPE_NOT_FOUND)
    with store_op("get recipe"):
        doc = await db["recipes"].find_one({"_id": oid}, DETAIL_PROJECTION)
    if not doc:
        raise NotFound(RECIPE_NOT_FOUND)
    return doc

async def create_recipe(db: AsyncIOMotorDatabase, payload: RecipeIn) -> str:
    doc = await build_recipe_document(db, payload)
    doc["reviews"] = []
    with store_op("insert recipe"):
        res = await db["recipes"].insert_one(doc)
    log.info("recipe created id=%s name=%r", res.inserted_id, doc["name"])
    return str(res.inserted_id)

async def replace_recipe(db: AsyncIOMotorDatabase, recipe_id: str, payload: RecipeIn) -> None:
    """
    전체 덮어쓰기 (patch 아님). 입력에 없는 선택 필드는 지운다.
    reviews 필드는 건드리지 않는다.
    """
    doc = await build_recipe_document(db, payload)

    oid = parse_object_id(recipe_id)
    if oid is None:
        raise NotFound(RECIPE_NOT_FOUND)

    update: Dict[str, Any] = {"$set": doc}
    unset = {f: "" for f in OPTIONAL_FIELDS if f not in doc}
    if unset:
        update["$unset"] = unset

    with store_op("replace recipe"):
        res = await db["recipes"].update_one({"_id": oid}, update)
    if res.matched_count == 0:
        raise NotFound(RECIPE_NOT_FOUND)

async def delete_recipe(db: AsyncIOMotorDatabase, recipe_id: str) -> None:
    oid = parse_object_id(recipe_id)
    if oid is None:
        raise NotFound(RECIPE_NOT_FOUND)
    with store_op("delete recipe"):
        res = await db["recipes"].delete_one({"_id": oid})
    if res.deleted_count == 0:
        raise NotFound(RECIPE_NOT_FOUND)
    log.info("recipe deleted id=%s", recipe_id)
