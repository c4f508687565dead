# recipe_book/db/models/schemas.py
# 요청 바디 Pydantic 모델
# 필수 여부는 서비스 계층에서 검사한다 (누락 → 400 MissingField).
# 그래서 여기서는 전부 Optional 로 두고 타입만 본다.
from __future__ import annotations
from typing import Any, Dict, List, Optional
from pydantic import BaseModel, ConfigDict

# # 레시피 생성/전체 교체 입력
class RecipeIn(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: Optional[str] = None
    cuisine: Optional[str] = None              # cuisines 컬렉션의 이름
    ingredients: Optional[List[Dict[str, Any]]] = None   # [{"name": ..., "quantity": ...}, ...]
    instructions: Optional[List[str]] = None
    tags: Optional[List[str]] = None           # tags 컬렉션의 이름들

    # 검증 없이 그대로 저장
    prepTime: Optional[Any] = None
    cookTime: Optional[Any] = None
    servings: Optional[Any] = None

# # 리뷰 추가/교체 입력
class ReviewIn(BaseModel):
    model_config = ConfigDict(extra="ignore")

    user: Optional[str] = None
    rating: Optional[int] = None
    comment: Optional[str] = None

# # 회원가입 입력
class UserIn(BaseModel):
    model_config = ConfigDict(extra="ignore")

    email: Optional[str] = None
    password: Optional[str] = None
