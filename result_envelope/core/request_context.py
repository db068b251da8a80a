from __future__ import annotations

import uuid
from contextvars import ContextVar, Token

# 当前请求ID，供日志过滤器和错误信封使用
request_id_var: ContextVar[str | None] = ContextVar("request_id", default=None)


def current_request_id() -> str:
    return request_id_var.get() or "-"


def bind_request_id(incoming: str | None) -> tuple[str, Token[str | None]]:
    """Bind ``incoming`` (or a fresh id) to the current context."""
    req_id = incoming or uuid.uuid4().hex
    return req_id, request_id_var.set(req_id)
