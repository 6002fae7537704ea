"""Unit tests for rangelink.cli._handle_stage_result."""

from types import SimpleNamespace

import pytest

from rangelink.cli._handle_stage_result import _extract_display_format

pytestmark = pytest.mark.cli


def _ctx(obj=None, parent=None):
    return SimpleNamespace(obj=obj, parent=parent)


def test_format_found_on_parent_context():
    root = _ctx({"display_format": "json"})
    command = _ctx(None, parent=_ctx(None, parent=root))
    assert _extract_display_format(command) == "json"


def test_nearest_context_wins():
    root = _ctx({"display_format": "yaml"})
    assert _extract_display_format(_ctx({"display_format": "json"}, parent=root)) == "json"


def test_missing_format_defaults_to_yaml():
    assert _extract_display_format(_ctx({}, parent=_ctx(None))) == "yaml"
    assert _extract_display_format(None) == "yaml"


def test_invalid_format_raises():
    with pytest.raises(ValueError, match="Invalid display_format"):
        _extract_display_format(_ctx({"display_format": "xml"}))
