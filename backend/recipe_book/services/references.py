# recipe_book/services/references.py
# cuisine/tag 이름 → 저장용 스냅샷 {id, name} 해석
# 읽기만 한다. 해석 후 레시피 쓰기까지는 트랜잭션이 아님 (사이에 참조가 지워질 수 있음)

from __future__ import annotations
from typing import Any, Dict, List, Sequence

from motor.motor_asyncio import AsyncIOMotorDatabase

from recipe_book.db.models.recipe import RefDoc
from recipe_book.exceptions.custom_exceptions import InvalidReference
from recipe_book.services.store import store_op

def _snapshot(doc: Dict[str, Any]) -> Dict[str, Any]:
    return RefDoc(id=str(doc["_id"]), name=doc["name"]).model_dump()

async def resolve_references(
    db: AsyncIOMotorDatabase,
    cuisine_name: str,
    tag_names: Sequence[str],
) -> Dict[str, Any]:
    """
    cuisine 은 이름 완전일치 1건, tags 는 이름 $in 조회.
    요청한 태그 수와 찾은 수가 다르면 실패한다.
    요청 안의 중복 이름은 미리 합치지 않으므로 중복이 있으면 역시 실패한다.
    """
    with store_op("resolve cuisine"):
        cuisine = await db["cuisines"].find_one({"name": cuisine_name})
    if not cuisine:
        raise InvalidReference("Invalid cuisine")

    requested: List[str] = list(tag_names)
    with store_op("resolve tags"):
        found = await db["tags"].find({"name": {"$in": requested}}).to_list(length=None)
    if len(found) != len(requested):
        raise InvalidReference("One or more invalid tags")

    # 요청 순서대로 정렬
    by_name = {d["name"]: d for d in found}
    if any(n not in by_name for n in requested):
        raise InvalidReference("One or more invalid tags")
    tags = [_snapshot(by_name[n]) for n in requested]

    return {"cuisine": _snapshot(cuisine), "tags": tags}
