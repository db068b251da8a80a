from __future__ import annotations

from typing import Any, Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, computed_field

from result_envelope.schemas.codes import SUCCESS_CODE, ResultCode, SystemCode

T = TypeVar("T")


class Envelope(BaseModel, Generic[T]):
    """Standard result envelope: ``code``, ``success``, ``msg`` and optional ``data``.

    Instances are frozen. ``success`` is computed from ``code`` and is never
    stored, so it cannot drift from the code it describes. Equality is
    field-wise; hashing works only when ``data`` itself is hashable.
    """

    model_config = ConfigDict(frozen=True)

    code: int
    msg: str
    data: Optional[T] = None

    @computed_field  # type: ignore[prop-decorator]
    @property
    def success(self) -> bool:
        return self.code == SUCCESS_CODE


def success(data: Optional[T] = None) -> Envelope[T]:
    """返回成功，可携带数据。"""
    return Envelope(code=SUCCESS_CODE, msg=SystemCode.SUCCESS.msg, data=data)


def fail(msg: str) -> Envelope[Any]:
    """返回通用失败码和给定的消息。"""
    return Envelope(code=SystemCode.FAILURE.code, msg=msg)


def fail_code(result_code: ResultCode, msg: Optional[str] = None) -> Envelope[Any]:
    """Fail with ``result_code``; ``msg`` overrides the code's default message."""
    return Envelope(code=result_code.code, msg=result_code.msg if msg is None else msg)


def status(ok: bool, msg: str) -> Envelope[Any]:
    return success() if ok else fail(msg)


def status_code(ok: bool, result_code: ResultCode) -> Envelope[Any]:
    return success() if ok else fail_code(result_code)


def is_success(result: Optional[Envelope[Any]]) -> bool:
    if result is None:
        return False
    return result.code == SUCCESS_CODE


def is_not_success(result: Optional[Envelope[Any]]) -> bool:
    return not is_success(result)


def get_data(result: Optional[Envelope[T]]) -> Optional[T]:
    """Payload of a successful envelope; ``None`` for failures or a missing envelope."""
    if result is None or not result.success:
        return None
    return result.data
