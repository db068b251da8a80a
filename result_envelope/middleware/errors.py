from __future__ import annotations

import logging
from typing import Any, Mapping, Sequence

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from result_envelope.core.config import settings
from result_envelope.core.exceptions import ServiceException
from result_envelope.schemas.codes import SystemCode
from result_envelope.schemas.common import Envelope, fail_code

logger = logging.getLogger(__name__)


def envelope_response(
    result: Envelope[Any], status_code: int = 200, headers: Mapping[str, str] | None = None
) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=result.model_dump(mode="json"), headers=headers)


def _validation_message(errors: Sequence[Any]) -> str:
    parts = []
    for err in errors:
        loc = ".".join(str(p) for p in err.get("loc", ()))
        parts.append(f"{loc}: {err.get('msg', 'invalid')}")
    return "; ".join(parts)


def register_exception_handlers(app: FastAPI) -> None:
    """注册异常处理器，所有错误都以统一的结果信封返回。"""

    @app.exception_handler(ServiceException)
    async def service_exception_handler(request: Request, exc: ServiceException) -> JSONResponse:
        logger.warning("业务异常", extra={"path": request.url.path, "code": exc.code, "detail": str(exc)})
        return envelope_response(exc.result, settings.SERVICE_EXCEPTION_HTTP_STATUS)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        logger.warning("HTTP异常", extra={"path": request.url.path, "detail": exc.detail})
        code = SystemCode.from_code(exc.status_code)
        if code is None:
            result: Envelope[Any] = Envelope(code=exc.status_code, msg=str(exc.detail))
        else:
            result = fail_code(code, str(exc.detail))
        # Allow / WWW-Authenticate 等响应头需要保留
        return envelope_response(result, exc.status_code, getattr(exc, "headers", None))

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        logger.warning("验证错误", extra={"path": request.url.path, "errors": exc.errors()})
        result = fail_code(SystemCode.PARAM_VALID_ERROR, _validation_message(exc.errors()))
        return envelope_response(result, 422)

    @app.middleware("http")
    async def catch_unhandled_exceptions(request: Request, call_next):  # type: ignore[no-untyped-def]
        try:
            return await call_next(request)
        except Exception as exc:
            logger.exception("未处理的异常", extra={"path": request.url.path})
            msg = str(exc) if settings.EXPOSE_ERROR_DETAIL else None
            return envelope_response(fail_code(SystemCode.SERVER_ERROR, msg), 500)
