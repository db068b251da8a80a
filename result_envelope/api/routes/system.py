from __future__ import annotations

import logging
from typing import Any, Dict

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from result_envelope.api.deps import require_admin
from result_envelope.core.config import settings
from result_envelope.core.exceptions import throw_on_fail_code
from result_envelope.schemas.codes import SystemCode
from result_envelope.schemas.common import Envelope, success

router = APIRouter(tags=["system"])

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class LogLevelPatch(BaseModel):
    level: str


@router.get("/health", response_model=Envelope[Dict[str, Any]])
def health_check() -> Envelope[Dict[str, Any]]:
    return success({"status": "ok", "app": settings.APP_NAME, "version": settings.APP_VERSION})


@router.patch(
    "/system/log-level",
    response_model=Envelope[Dict[str, Any]],
    dependencies=[Depends(require_admin)],
)
def patch_log_level(req: LogLevelPatch) -> Envelope[Dict[str, Any]]:
    """运行时调整应用程序根日志级别。

    接受debug、info、warning、error、critical，其他取值返回参数校验失败的信封。
    """
    level_upper = req.level.upper()
    throw_on_fail_code(level_upper in LOG_LEVELS, SystemCode.PARAM_VALID_ERROR, "invalid_log_level")
    logging.getLogger().setLevel(level_upper)
    logging.getLogger(__name__).info("Log level changed", extra={"new_level": level_upper})
    return success({"level": level_upper})
