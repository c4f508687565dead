# 레시피/리뷰 저장 문서 스키마
from datetime import datetime, timezone
from bson import ObjectId
from pydantic import BaseModel, Field

def _utcnow() -> datetime:
    return datetime.now(timezone.utc)

def new_id() -> str:
    return str(ObjectId())

# cuisine / tag 스냅샷. 저장 시점 값 복사본이지 참조가 아님
class RefDoc(BaseModel):
    id: str
    name: str

class ReviewDoc(BaseModel):
    reviewId: str = Field(default_factory=new_id)
    user: str
    rating: int
    comment: str
    date: datetime = Field(default_factory=_utcnow)
