"""Path quoting check (UNO: single function)."""

import re

_SAFE_PATH = re.compile(r"^[A-Za-z0-9_.\-/:]+$")


def needs_quoting(path: str) -> bool:
    """Return True when the path has characters a shell or chat input would split on."""
    if not path:
        return False
    return _SAFE_PATH.match(path) is None
