# recipe_book/core/config.py
# 환경변수 로딩 (.env)
from typing import List

from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    MONGO_URI: str = "mongodb://localhost:27017"  # 필요 시 prod/staging로 분리
    MONGO_DB: str = "recipe_book"

    # 비밀번호 해시 work factor (bcrypt cost)
    BCRYPT_ROUNDS: int = 12

    CORS_ORIGINS: List[str] = ["*"]
    LOG_LEVEL: str = "INFO"

    # 스타트업 DB 연결 재시도 횟수 (1초 간격)
    DB_INIT_RETRIES: int = 20

    class Config:
        env_file = ".env"

settings = Settings()
