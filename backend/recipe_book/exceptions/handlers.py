# recipe_book/exceptions/handlers.py
# 예외 → HTTP 응답 매핑. 응답 바디는 항상 {"error": str}

from __future__ import annotations
import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from recipe_book.exceptions.custom_exceptions import RecipeBookError, StoreFailure

log = logging.getLogger(__name__)

INTERNAL_ERROR = "Internal server error"

async def recipe_book_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    if isinstance(exc, StoreFailure):
        # 서버 쪽에만 상세 원인 기록, 클라이언트에는 일반 메시지
        log.error(
            "store failure on %s %s: %s",
            request.method, request.url.path, exc.message,
            exc_info=exc.__cause__ or exc,
        )
        return JSONResponse(status_code=exc.status_code, content={"error": INTERNAL_ERROR})

    status = getattr(exc, "status_code", 500)
    message = getattr(exc, "message", str(exc))
    log.info("%s %s -> %d %s", request.method, request.url.path, status, message)
    return JSONResponse(status_code=status, content={"error": message})

async def validation_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    # 바디/파라미터 타입 오류도 400 으로 통일 (FastAPI 기본은 422)
    errors = exc.errors() if isinstance(exc, RequestValidationError) else []
    parts = []
    for e in errors:
        loc = ".".join(str(x) for x in e.get("loc", ()) if x != "body")
        parts.append(f"{loc}: {e.get('msg')}" if loc else str(e.get("msg")))
    message = "Invalid request: " + ("; ".join(parts) if parts else "malformed input")
    log.info("%s %s -> 400 %s", request.method, request.url.path, message)
    return JSONResponse(status_code=400, content={"error": message})

async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    log.exception("unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(status_code=500, content={"error": INTERNAL_ERROR})

def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RecipeBookError, recipe_book_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
