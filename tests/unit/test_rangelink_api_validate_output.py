"""Unit tests for rangelink.api.validate_output."""

import pytest
from pydantic import BaseModel

from rangelink.api.link.cmd_validate import cmd_validate
from rangelink.api.validate_output import validate_output


class MockOutput(BaseModel):
    key: str
    optional: str = "default"


def mock_cmd_func():
    pass


mock_cmd_func.__module__ = "rangelink.api.test_domain"
mock_cmd_func.__name__ = "cmd_mock_command"


def test_validate_output_success(monkeypatch):
    monkeypatch.setattr("rangelink.api.validate_output.get_output_schema", lambda d, c: MockOutput)

    assert validate_output(mock_cmd_func, {"key": "value"}) == {"key": "value", "optional": "default"}


def test_validate_output_failure(monkeypatch):
    monkeypatch.setattr("rangelink.api.validate_output.get_output_schema", lambda d, c: MockOutput)

    with pytest.raises(ValueError, match="Output validation failed"):
        validate_output(mock_cmd_func, {"wrong": "value"})


def test_validate_output_no_schema():
    output = {"anything": 1}
    assert validate_output(mock_cmd_func, output) == output


def test_validate_output_skip_non_api():
    def non_api_func():
        pass

    non_api_func.__module__ = "other.module"
    assert validate_output(non_api_func, {"foo": "bar"}) == {"foo": "bar"}


def test_validate_output_skip_non_cmd():
    def helper():
        pass

    helper.__module__ = "rangelink.api.link"
    assert validate_output(helper, {"foo": "bar"}) == {"foo": "bar"}


def test_registered_schema_rejects_missing_field():
    with pytest.raises(ValueError, match="link.validate"):
        validate_output(cmd_validate, {"errors": [], "warnings": []})
