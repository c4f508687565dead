# recipe_book/core/logging.py
# 로깅 초기화. 앱 스타트업에서 한 번만 호출한다.

from __future__ import annotations
import logging

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

def setup_logging(level: str = "INFO") -> None:
    root = logging.getLogger()
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)
    root.setLevel(level.upper())

    # 드라이버 디버그 로그는 너무 많다
    logging.getLogger("pymongo").setLevel(logging.WARNING)
