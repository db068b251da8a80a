from __future__ import annotations

from typing import Any, Dict

import uvicorn
from fastapi import FastAPI

from result_envelope.api.routes.system import router as system_router
from result_envelope.core.config import settings
from result_envelope.core.logging import setup_logging
from result_envelope.middleware.errors import register_exception_handlers
from result_envelope.middleware.request_id import RequestIdMiddleware
from result_envelope.schemas.common import Envelope, success


def create_app() -> FastAPI:
    setup_logging(level=settings.LOG_LEVEL)

    application = FastAPI(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        description="统一结果信封的 FastAPI 服务",
    )

    register_exception_handlers(application)
    # 请求ID中间件在最外层，错误信封也会带上 X-Request-ID
    application.add_middleware(RequestIdMiddleware)

    application.include_router(system_router, prefix="/api")

    @application.get("/", tags=["root"], response_model=Envelope[Dict[str, Any]])
    async def root() -> Envelope[Dict[str, Any]]:
        return success({"message": f"{settings.APP_NAME} is running"})

    return application


app = create_app()


if __name__ == "__main__":
    uvicorn.run(app, host=settings.WEB_HOST, port=settings.WEB_PORT)
