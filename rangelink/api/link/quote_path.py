"""Single-quote a path when needed (UNO: single function)."""

from .needs_quoting import needs_quoting


def quote_path(path: str) -> str:
    """Wrap the path in single quotes if it needs quoting, escaping embedded quotes as ``'\\''``."""
    if not needs_quoting(path):
        return path
    return "'" + path.replace("'", "'\\''") + "'"
