from __future__ import annotations

from enum import Enum
from typing import Optional, Protocol, runtime_checkable


@runtime_checkable
class ResultCode(Protocol):
    """A named (code, msg) pair that an envelope can be built from."""

    @property
    def code(self) -> int: ...

    @property
    def msg(self) -> str: ...


class SystemCode(Enum):
    """系统内置的结果码。SUCCESS 是唯一表示成功的码。"""

    SUCCESS = (0, "Operation succeeded")
    FAILURE = (1, "Operation failed")

    UN_AUTHORIZED = (401, "Request unauthorized")
    REQ_REJECT = (403, "Request rejected")
    NOT_FOUND = (404, "Resource not found")
    METHOD_NOT_SUPPORTED = (405, "Request method not supported")
    MEDIA_TYPE_NOT_ACCEPT = (406, "Media type not acceptable")
    MEDIA_TYPE_NOT_SUPPORTED = (415, "Media type not supported")
    SERVER_ERROR = (500, "Internal server error")

    # 参数错误
    PARAM_MISS = (100000, "Missing required request parameter")
    PARAM_TYPE_ERROR = (100001, "Request parameter type mismatch")
    PARAM_BIND_ERROR = (100002, "Request parameter binding failed")
    PARAM_VALID_ERROR = (100003, "Request parameter validation failed")
    MSG_NOT_READABLE = (100004, "Request body not readable")

    # 数据操作错误
    DATA_NOT_EXIST = (100100, "Data does not exist")
    DATA_EXISTED = (100101, "Data already exists")
    DATA_ADD_FAILED = (100102, "Failed to add data")
    DATA_UPDATE_FAILED = (100103, "Failed to update data")
    DATA_DELETE_FAILED = (100104, "Failed to delete data")

    def __init__(self, code: int, msg: str) -> None:
        self._code = code
        self._msg = msg

    @property
    def code(self) -> int:
        return self._code

    @property
    def msg(self) -> str:
        return self._msg

    @classmethod
    def from_code(cls, code: int) -> Optional["SystemCode"]:
        for member in cls:
            if member.code == code:
                return member
        return None


SUCCESS_CODE: int = SystemCode.SUCCESS.code
