# recipe_book/services/store.py
# DB 호출 공통 헬퍼: 드라이버 오류 → StoreFailure, 문자열 id → ObjectId

from __future__ import annotations
from contextlib import contextmanager
from typing import Iterator, Optional

from bson import ObjectId
from bson.errors import InvalidId
from pymongo.errors import PyMongoError

from recipe_book.exceptions.custom_exceptions import StoreFailure

@contextmanager
def store_op(operation: str) -> Iterator[None]:
    # with 블록 안에서 난 PyMongoError 만 감싼다. 도메인 예외는 그대로 통과
    try:
        yield
    except PyMongoError as e:
        raise StoreFailure(operation) from e

def parse_object_id(value: Optional[str]) -> Optional[ObjectId]:
    # 형식이 틀린 id 는 "없는 문서"와 같게 취급 (호출 측에서 NotFound)
    # ObjectId(None) 은 새 id 를 만들어 버리므로 먼저 거른다
    if value is None:
        return None
    try:
        return ObjectId(value)
    except (InvalidId, TypeError):
        return None

def is_missing(value) -> bool:
    # null / 빈 문자열 / 빈 배열은 누락으로 본다
    return value is None or value == "" or value == [] or value == {}
