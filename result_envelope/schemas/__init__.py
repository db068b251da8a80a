"""Result envelope schemas and system codes."""

from .codes import SUCCESS_CODE, ResultCode, SystemCode  # noqa: F401
from .common import (  # noqa: F401
    Envelope,
    fail,
    fail_code,
    get_data,
    is_not_success,
    is_success,
    status,
    status_code,
    success,
)
