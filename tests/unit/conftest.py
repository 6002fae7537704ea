"""Unit test fixtures.

Most helpers are in tests/conftest.py and re-exported here.
"""

from tests.conftest import normal, rectangular, run_cmd, sel

__all__ = ["normal", "rectangular", "run_cmd", "sel"]
