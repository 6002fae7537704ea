"""Shared pytest configuration and fixtures for all tests."""

import json
from pathlib import Path

import pytest

from rangelink.api.link.InputSelection import InputSelection
from rangelink.api.link.Selection import Selection
from rangelink.api.link.SelectionType import SelectionType


def pytest_configure(config):
    for marker in ("smoke", "unit", "integration", "link", "config", "cli"):
        config.addinivalue_line("markers", f"{marker}: {marker} tests")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        path_str = str(item.fspath)
        if "/smoke/" in path_str:
            item.add_marker(pytest.mark.smoke)
        elif "/unit/" in path_str:
            item.add_marker(pytest.mark.unit)
        elif "/integration/" in path_str:
            item.add_marker(pytest.mark.integration)


# =============================================================================
# Selection Helpers
# =============================================================================


def sel(start_line: int, start_char: int, end_line: int, end_char: int, whole_line: bool = False) -> Selection:
    """Shorthand for a 0-based Selection."""
    return Selection.from_bounds(start_line, start_char, end_line, end_char, is_whole_line=whole_line)


def normal(*selections: Selection) -> InputSelection:
    return InputSelection(selections=tuple(selections), selection_type=SelectionType.NORMAL)


def rectangular(*selections: Selection) -> InputSelection:
    return InputSelection(selections=tuple(selections), selection_type=SelectionType.RECTANGULAR)


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def rangelink_home(tmp_path: Path, monkeypatch) -> Path:
    """Point RANGELINK_HOME at an empty temporary directory."""
    home = tmp_path / ".rangelink"
    home.mkdir()
    monkeypatch.setenv("RANGELINK_HOME", str(home))
    return home


@pytest.fixture
def write_config(rangelink_home: Path):
    """Write a config.json into the temporary home directory."""

    def _write(config: dict | str) -> Path:
        path = rangelink_home / "config.json"
        path.write_text(config if isinstance(config, str) else json.dumps(config), encoding="utf-8")
        return path

    return _write


# =============================================================================
# Command Helpers
# =============================================================================


def run_cmd(cmd_func, *args, **kwargs):
    """Execute a cmd function and return the result with progress_callback executed."""
    result = cmd_func(*args, **kwargs)
    list(result.progress_callback(result))
    return result
