"""Join a path and an anchor (UNO: single function)."""

from .DelimiterConfig import DelimiterConfig
from .SelectionType import SelectionType


def join_with_hash(path: str, anchor: str, delimiters: DelimiterConfig, selection_type: SelectionType) -> str:
    """Join with one hash, or two for a rectangular selection."""
    hash_run = delimiters.hash * 2 if selection_type == SelectionType.RECTANGULAR else delimiters.hash
    return f"{path}{hash_run}{anchor}"
