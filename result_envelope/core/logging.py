from __future__ import annotations

import logging
from logging.config import dictConfig
from pathlib import Path
from typing import Any

from result_envelope.core.config import settings
from result_envelope.core.request_context import current_request_id


class RequestIdFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        setattr(record, "request_id", current_request_id())
        return True


def _file_handler() -> dict[str, Any]:
    common: dict[str, Any] = {
        "formatter": "json",
        "filters": ["reqid"],
        "filename": settings.LOG_FILE_PATH,
        "backupCount": settings.LOG_BACKUP_COUNT,
        "encoding": "utf-8",
    }
    if settings.LOG_ROTATION_POLICY == "size":
        return {
            "class": "logging.handlers.RotatingFileHandler",
            "maxBytes": settings.LOG_MAX_BYTES,
            **common,
        }
    return {
        "class": "logging.handlers.TimedRotatingFileHandler",
        "when": settings.LOG_ROTATION_WHEN,
        "interval": settings.LOG_ROTATION_INTERVAL,
        **common,
    }


LOG_FORMAT = (
    "{\"ts\":%(asctime)s, \"lvl\":%(levelname)s, "
    "\"logger\":%(name)s, \"msg\":%(message)s, "
    "\"req_id\":%(request_id)s}"
)


def build_logging_config(level: str) -> dict[str, Any]:
    """dictConfig 配置：标准输出，可选的轮转日志文件，每条记录带请求ID。"""
    handlers: dict[str, dict[str, Any]] = {
        "default": {"class": "logging.StreamHandler", "formatter": "json", "filters": ["reqid"]},
    }
    if settings.LOG_TO_FILE:
        handlers["file"] = _file_handler()

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "filters": {"reqid": {"()": RequestIdFilter}},
        "formatters": {"json": {"format": LOG_FORMAT}},
        "handlers": handlers,
        "root": {"level": level.upper(), "handlers": list(handlers)},
    }


def setup_logging(level: str = "info") -> None:
    if settings.LOG_TO_FILE:
        Path(settings.LOG_FILE_PATH).parent.mkdir(parents=True, exist_ok=True)
    dictConfig(build_logging_config(level))
    logging.getLogger(__name__).info("日志配置完成", extra={"level": level.upper()})
