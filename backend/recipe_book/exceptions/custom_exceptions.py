# recipe_book/exceptions/custom_exceptions.py
# 요청 검증/문서 변경 과정에서 나는 오류 분류
# 라우터 경계(handlers.py)에서 HTTP 상태로 변환된다.

from __future__ import annotations
from typing import Iterable

class RecipeBookError(Exception):
    """모든 도메인 오류의 기반. status_code 로 HTTP 상태를 정한다."""

    status_code: int = 500

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

class MissingField(RecipeBookError):
    """필수 입력 필드 누락"""

    status_code = 400

    def __init__(self, fields: Iterable[str]) -> None:
        self.fields = list(fields)
        super().__init__(f"Missing required fields: {', '.join(self.fields)}")

class InvalidReference(RecipeBookError):
    """존재하지 않는 cuisine/tag 이름"""

    status_code = 400

class NotFound(RecipeBookError):
    """id 로 레시피(또는 리뷰)를 찾지 못함"""

    status_code = 404

class StoreFailure(RecipeBookError):
    """DB 드라이버/연결 오류. 원인은 __cause__ 로 연결된다."""

    status_code = 500

    def __init__(self, operation: str) -> None:
        self.operation = operation
        super().__init__(f"Database operation failed: {operation}")
