from __future__ import annotations

from result_envelope.schemas.codes import SUCCESS_CODE, ResultCode, SystemCode


def test_only_success_uses_success_code():
    matches = [c for c in SystemCode if c.code == SUCCESS_CODE]
    assert matches == [SystemCode.SUCCESS]


def test_codes_are_unique():
    codes = [c.code for c in SystemCode]
    assert len(codes) == len(set(codes))


def test_from_code():
    assert SystemCode.from_code(404) is SystemCode.NOT_FOUND
    assert SystemCode.from_code(0) is SystemCode.SUCCESS
    assert SystemCode.from_code(999) is None


def test_system_code_is_a_result_code():
    assert isinstance(SystemCode.FAILURE, ResultCode)
    assert SystemCode.SERVER_ERROR.code == 500
    assert SystemCode.SERVER_ERROR.msg == "Internal server error"
