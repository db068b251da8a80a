"""Generic result envelope for reporting operation outcomes."""

from .core.exceptions import (  # noqa: F401
    ServiceException,
    throw_fail,
    throw_fail_code,
    throw_on_fail,
    throw_on_fail_code,
    unwrap,
)
from .schemas.codes import SUCCESS_CODE, ResultCode, SystemCode  # noqa: F401
from .schemas.common import (  # noqa: F401
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

__all__ = [
    "Envelope",
    "ResultCode",
    "SUCCESS_CODE",
    "ServiceException",
    "SystemCode",
    "fail",
    "fail_code",
    "get_data",
    "is_not_success",
    "is_success",
    "status",
    "status_code",
    "success",
    "throw_fail",
    "throw_fail_code",
    "throw_on_fail",
    "throw_on_fail_code",
    "unwrap",
]
