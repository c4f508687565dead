# 사용자 저장 문서. 평문 비밀번호는 저장하지 않는다
from pydantic import BaseModel

class UserDoc(BaseModel):
    email: str
    passwordHash: str
