from __future__ import annotations

from typing import Any, NoReturn, Optional, TypeVar

from result_envelope.schemas.codes import ResultCode, SystemCode
from result_envelope.schemas.common import (
    Envelope,
    fail,
    fail_code,
    get_data,
    is_success,
)

T = TypeVar("T")


class ServiceException(Exception):
    """业务异常，携带一个失败的结果信封，由异常处理器原样返回给调用方。"""

    def __init__(self, result: Envelope[Any]) -> None:
        if result.success:
            raise ValueError("ServiceException requires a failed envelope")
        super().__init__(result.msg)
        self.result = result

    @property
    def code(self) -> int:
        return self.result.code

    @classmethod
    def from_msg(cls, msg: str) -> "ServiceException":
        return cls(fail(msg))

    @classmethod
    def from_code(cls, result_code: ResultCode, msg: Optional[str] = None) -> "ServiceException":
        return cls(fail_code(result_code, msg))


def throw_fail(msg: str) -> NoReturn:
    raise ServiceException.from_msg(msg)


def throw_fail_code(result_code: ResultCode, msg: Optional[str] = None) -> NoReturn:
    raise ServiceException.from_code(result_code, msg)


def throw_on_fail(ok: bool, msg: str) -> None:
    """Raise a generic failure when ``ok`` is false."""
    if not ok:
        throw_fail(msg)


def throw_on_fail_code(ok: bool, result_code: ResultCode, msg: Optional[str] = None) -> None:
    if not ok:
        throw_fail_code(result_code, msg)


def unwrap(result: Optional[Envelope[T]]) -> Optional[T]:
    """Return the payload of a successful envelope, otherwise raise it as a ServiceException."""
    if is_success(result):
        return get_data(result)
    if result is None:
        throw_fail_code(SystemCode.FAILURE)
    raise ServiceException(result)
