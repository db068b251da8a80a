from __future__ import annotations

import logging
import time
from typing import Callable

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

from result_envelope.core.config import settings
from result_envelope.core.request_context import bind_request_id, request_id_var


logger = logging.getLogger(__name__)


class RequestIdMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next: Callable):  # type: ignore[no-untyped-def]
        header = settings.REQUEST_ID_HEADER
        req_id, token = bind_request_id(request.headers.get(header))
        start = time.perf_counter()
        try:
            logger.debug("request_start", extra={"method": request.method, "path": request.url.path})
            response = await call_next(request)
            response.headers[header] = req_id
            logger.debug(
                "request_end",
                extra={
                    "method": request.method,
                    "path": request.url.path,
                    "status": response.status_code,
                    "duration_ms": round((time.perf_counter() - start) * 1000, 2),
                },
            )
            return response
        finally:
            request_id_var.reset(token)
