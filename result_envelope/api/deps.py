from __future__ import annotations

import secrets

from fastapi import Request

from result_envelope.core.config import settings
from result_envelope.core.exceptions import throw_fail_code, throw_on_fail_code
from result_envelope.schemas.codes import SystemCode


def require_admin(request: Request) -> None:
    """Check the admin token header against ``settings.ADMIN_TOKEN``."""
    expected = settings.ADMIN_TOKEN
    if not expected:
        throw_fail_code(SystemCode.UN_AUTHORIZED, "admin_disabled")
    provided = request.headers.get(settings.ADMIN_TOKEN_HEADER, "")
    throw_on_fail_code(
        secrets.compare_digest(provided.encode(), expected.encode()),
        SystemCode.UN_AUTHORIZED,
        "admin_required",
    )
