"""Unit tests for Result and RangeLinkError."""

import pytest

from rangelink.api.link.RangeLinkError import RangeLinkError
from rangelink.api.link.RangeLinkErrorCodes import RangeLinkErrorCodes
from rangelink.api.link.Result import Result

pytestmark = pytest.mark.link


def _error() -> RangeLinkError:
    return RangeLinkError(
        code=RangeLinkErrorCodes.PARSE_EMPTY_PATH,
        message="Path cannot be empty",
        function_name="parse_link",
        details={"link": "#L1"},
    )


def test_ok():
    result = Result.ok(42)
    assert result.success is True
    assert result.value == 42
    assert result.to_dict() == {"success": True, "value": 42}


def test_err():
    result = Result.err(_error())
    assert result.success is False
    assert result.error.code == RangeLinkErrorCodes.PARSE_EMPTY_PATH
    assert result.to_dict()["error"]["code"] == "PARSE_EMPTY_PATH"


def test_value_on_error_raises():
    with pytest.raises(RangeLinkError) as exc_info:
        _ = Result.err(_error()).value
    assert exc_info.value.code == RangeLinkErrorCodes.RESULT_VALUE_ACCESS_ON_ERROR


def test_error_on_success_raises():
    with pytest.raises(RangeLinkError) as exc_info:
        _ = Result.ok(None).error
    assert exc_info.value.code == RangeLinkErrorCodes.RESULT_ERROR_ACCESS_ON_SUCCESS


def test_error_str_and_dict():
    error = _error()
    assert str(error) == "[PARSE_EMPTY_PATH] Path cannot be empty"
    assert error.to_dict() == {
        "code": "PARSE_EMPTY_PATH",
        "message": "Path cannot be empty",
        "function_name": "parse_link",
        "details": {"link": "#L1"},
    }


def test_error_cause_is_chained():
    cause = ValueError("boom")
    error = RangeLinkError(
        code=RangeLinkErrorCodes.SELECTION_EMPTY, message="x", function_name="f", cause=cause
    )
    assert error.__cause__ is cause
    assert error.details == {}
