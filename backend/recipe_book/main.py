# recipe_book/main.py
# FastAPI 앱 초기화 및 라우터 설정
# 라우터는 리소스별로 분리하여 관리

from __future__ import annotations

import logging
from asyncio import sleep
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from recipe_book.api.routes_recipes import router as recipes_router   # 레시피 CRUD/검색
from recipe_book.api.routes_reviews import router as reviews_router   # 레시피 리뷰
from recipe_book.api.routes_users import router as users_router       # 회원가입
from recipe_book.core.config import settings
from recipe_book.core.logging import setup_logging
from recipe_book.db.indexes import ensure_indexes
from recipe_book.db.init import close_db, init_db
from recipe_book.exceptions.handlers import register_exception_handlers

log = logging.getLogger(__name__)

# 앱 시작/종료 처리
async def on_startup(app: FastAPI) -> None:
    setup_logging(settings.LOG_LEVEL)

    # 1) DB 먼저 붙는다 (최대 DB_INIT_RETRIES 회, 1초 간격)
    client = db = None
    for i in range(settings.DB_INIT_RETRIES):
        try:
            client, db = await init_db(settings)
            log.info("[startup] db ready (%s)", settings.MONGO_DB)
            break
        except Exception as e:
            log.warning("[startup] db init retry %d: %s", i + 1, e)
            await sleep(1.0)
    if db is None:
        log.error("[startup] db init failed after retries")
        return

    # 핸들은 app.state 에 두고 라우터는 Depends(get_db)로 받는다
    app.state.mongo_client = client
    app.state.db = db

    # 2) 인덱스 보장
    try:
        await ensure_indexes(db)
        log.info("[startup] indexes ensured")
    except Exception:
        log.exception("[startup] ensure_indexes failed")

async def on_shutdown(app: FastAPI) -> None:
    # 몽고db 커넥션 정리
    await close_db(getattr(app.state, "mongo_client", None))
    app.state.mongo_client = None
    app.state.db = None

@asynccontextmanager
async def lifespan(app: FastAPI):
    await on_startup(app)
    yield
    await on_shutdown(app)

app = FastAPI(title="Recipe Book - API", version="0.1.0", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

@app.get("/")
async def root():
    return {"status": "ok"}

@app.get("/health")
async def health():
    ok = {"status": "ok", "db": "skip"}
    db = getattr(app.state, "db", None)
    if db is not None:
        try:
            await db.command("ping")
            ok["db"] = "ok"
        except Exception as e:
            ok["status"] = "degraded"
            ok["db"] = f"error: {e}"
    return ok

# 라우터 prefix는 각 파일 내에서 정의함, 중복 prefix 금지
app.include_router(recipes_router)
app.include_router(reviews_router)
app.include_router(users_router)
