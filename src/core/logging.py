"""
Logging setup: root logger 구성.

규칙:
- 모듈마다 logging.getLogger(__name__) 사용
- 사용자 입력은 sanitize 후에만 로그에 기록 (core.sanitize)
- format: "text" (사람용) 또는 "json" (한 줄 한 객체, 수집기용)
"""

import json
import logging
from datetime import UTC, datetime
from typing import Any

from src.core.settings import LogSettings

TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# uvicorn이 자체 핸들러를 붙이는 로거들 → root로 전파시킨다
UVICORN_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


class JsonFormatter(logging.Formatter):
    """로그 레코드를 JSON 한 줄로 직렬화."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False)


def build_formatter(log_format: str) -> logging.Formatter:
    """format 이름 → Formatter."""
    if log_format == "json":
        return JsonFormatter()
    return logging.Formatter(TEXT_FORMAT)


def configure_logging(log_settings: LogSettings) -> logging.Handler:
    """
    root logger에 stream handler 하나를 설치.

    여러 번 호출해도 핸들러가 중복되지 않는다 (기존 root 핸들러 교체).

    Args:
        log_settings: level/format 설정

    Returns:
        설치된 핸들러
    """
    handler = logging.StreamHandler()
    handler.setFormatter(build_formatter(log_settings.format))

    root = logging.getLogger()
    for existing in list(root.handlers):
        root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(log_settings.level)

    for name in UVICORN_LOGGERS:
        uvicorn_logger = logging.getLogger(name)
        uvicorn_logger.handlers.clear()
        uvicorn_logger.propagate = True
        uvicorn_logger.setLevel(log_settings.level)

    return handler
