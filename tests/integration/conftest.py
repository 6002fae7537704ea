"""Integration test fixtures."""

import logging

import pytest


@pytest.fixture(autouse=True)
def isolated_logging():
    """Drop handlers the CLI installs on the root logger."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    for handler in root.handlers[:]:
        if handler not in handlers:
            handler.close()
            root.removeHandler(handler)
    root.setLevel(level)
