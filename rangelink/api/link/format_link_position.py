"""Compact position display (UNO: single function)."""

from .LinkPosition import LinkPosition


def _format_one(position: LinkPosition) -> str:
    if position.char is None:
        return f"{position.line}"
    return f"{position.line}:{position.char}"


def format_link_position(start: LinkPosition, end: LinkPosition) -> str:
    """Format a range as ``line[:col][-line[:col]]``.

    Examples:
        ``42:10`` (single point), ``42`` (single line), ``10:5-20:10``, ``10-20``
    """
    if start == end:
        return _format_one(start)
    return f"{_format_one(start)}-{_format_one(end)}"
