from __future__ import annotations

import pytest

from result_envelope.core.exceptions import (
    ServiceException,
    throw_fail,
    throw_fail_code,
    throw_on_fail,
    throw_on_fail_code,
    unwrap,
)
from result_envelope.schemas.codes import SystemCode
from result_envelope.schemas.common import fail, fail_code, success


def test_throw_fail_carries_envelope():
    with pytest.raises(ServiceException) as ei:
        throw_fail("quota exceeded")
    assert ei.value.result == fail("quota exceeded")
    assert str(ei.value) == "quota exceeded"
    assert ei.value.code == SystemCode.FAILURE.code


def test_throw_fail_code():
    with pytest.raises(ServiceException) as ei:
        throw_fail_code(SystemCode.DATA_EXISTED)
    assert ei.value.result == fail_code(SystemCode.DATA_EXISTED)

    with pytest.raises(ServiceException) as ei:
        throw_fail_code(SystemCode.DATA_EXISTED, "user exists")
    assert ei.value.result.msg == "user exists"
    assert ei.value.code == 100101


def test_throw_on_fail_only_raises_when_not_ok():
    assert throw_on_fail(True, "unused") is None
    assert throw_on_fail_code(True, SystemCode.REQ_REJECT) is None
    with pytest.raises(ServiceException, match="denied"):
        throw_on_fail(False, "denied")
    with pytest.raises(ServiceException) as ei:
        throw_on_fail_code(False, SystemCode.REQ_REJECT)
    assert ei.value.code == 403


def test_unwrap():
    assert unwrap(success([1, 2])) == [1, 2]
    assert unwrap(success()) is None

    failed = fail_code(SystemCode.DATA_NOT_EXIST)
    with pytest.raises(ServiceException) as ei:
        unwrap(failed)
    assert ei.value.result is failed

    with pytest.raises(ServiceException) as ei:
        unwrap(None)
    assert ei.value.code == SystemCode.FAILURE.code


def test_service_exception_factories():
    assert ServiceException.from_msg("x").result == fail("x")
    assert ServiceException.from_code(SystemCode.NOT_FOUND, "trip").result == fail_code(SystemCode.NOT_FOUND, "trip")


def test_service_exception_rejects_successful_envelope():
    with pytest.raises(ValueError):
        ServiceException(success())
    with pytest.raises(ValueError):
        ServiceException(success({"id": 1}))
