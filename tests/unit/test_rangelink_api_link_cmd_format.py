"""Unit tests for rangelink.api.link.cmd_format."""

import pytest

from rangelink.api.link.cmd_format import cmd_format
from rangelink.api.link.RangeNotation import RangeNotation
from rangelink.api.validate_output import validate_output
from tests.unit.conftest import run_cmd

pytestmark = pytest.mark.link


def test_format_single_range(rangelink_home):
    result = run_cmd(cmd_format, "src/file.ts", ["10:5-20:15"])
    assert result.success is True
    assert result.result == "src/file.ts#L10C5-L20C15"
    assert result.output["link"] == "src/file.ts#L10C5-L20C15"
    assert result.output["range_format"] == "LineColumnRange"
    assert result.output["errors"] == []
    validate_output(cmd_format, result.output)


def test_format_whole_lines(rangelink_home):
    result = run_cmd(cmd_format, "a.py", ["10-20"])
    assert result.output["link"] == "a.py#L10-L20"
    assert result.output["range_format"] == "LineRange"


def test_format_rectangular(rangelink_home):
    result = run_cmd(cmd_format, "a.py", ["3:1-3:5", "4:1-4:5", "5:1-5:5"])
    assert result.output["link"] == "a.py##L3C1-L5C5"
    assert result.output["selection_type"] == "Rectangular"
    assert result.output["warnings"] == []


def test_consecutive_whole_lines_stay_a_line_range(rangelink_home):
    result = run_cmd(cmd_format, "f.py", ["5", "6", "7"])
    assert result.success is True
    assert result.output["link"] == "f.py#L5-L7"
    assert result.output["selection_type"] == "Normal"
    assert result.output["range_format"] == "LineRange"


def test_format_unaligned_ranges_warns(rangelink_home):
    result = run_cmd(cmd_format, "a.py", ["3:1-3:5", "8:2-8:4"])
    assert result.success is True
    assert result.output["link"] == "a.py#L3C1-L8C4"
    assert len(result.output["warnings"]) == 1


def test_notation_override(rangelink_home):
    result = run_cmd(cmd_format, "a.py", ["10:5-20:15"], notation=RangeNotation.ENFORCE_FULL_LINE)
    assert result.output["link"] == "a.py#L10-L20"


def test_configured_delimiters_are_used(write_config):
    write_config({"delimiters": {"line": "R", "position": "K", "range": "_", "hash": "!"}})
    result = run_cmd(cmd_format, "a.py", ["3:2-4:1"])
    assert result.output["link"] == "a.py!R3K2_R4K1"


def test_configured_notation_is_used(write_config):
    write_config({"notation": "EnforcePositions"})
    result = run_cmd(cmd_format, "a.py", ["10-20"])
    assert result.output["link"] == "a.py#L10C1-L20C1"


def test_invalid_range(rangelink_home):
    result = run_cmd(cmd_format, "a.py", ["ten"])
    assert result.success is False
    assert "Invalid range" in result.output["errors"][0]
    assert result.output["link"] == ""


def test_backward_range_reports_code(rangelink_home):
    result = run_cmd(cmd_format, "a.py", ["20-10"])
    assert result.success is False
    assert result.output["error_code"] == "SELECTION_BACKWARD_LINE"


def test_no_ranges(rangelink_home):
    result = run_cmd(cmd_format, "a.py", [])
    assert result.success is False
    assert result.output["error_code"] == "SELECTION_EMPTY"


def test_broken_config(write_config):
    write_config("{not json")
    result = run_cmd(cmd_format, "a.py", ["1"])
    assert result.success is False
    assert "Invalid JSON" in result.output["errors"][0]


def test_portable_link(write_config):
    write_config({"delimiters": {"line": "R", "position": "K", "range": "_", "hash": "!"}})
    result = run_cmd(cmd_format, "a.py", ["3:2-4:1"], portable=True)
    assert result.success is True
    assert result.output["link"] == "a.py!R3K2_R4K1~!~R~_~K~"
    assert result.output["link_type"] == "Portable"
