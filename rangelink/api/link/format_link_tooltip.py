"""Tooltip text for a parsed link (UNO: single function)."""

from .LinkPosition import LinkPosition
from .ParsedLink import ParsedLink


def _is_displayable(parsed: ParsedLink) -> bool:
    if not isinstance(parsed.path, str) or not parsed.path.strip():
        return False
    for position in (parsed.start, parsed.end):
        if position.line < 1:
            return False
        if position.char is not None and position.char < 1:
            return False
    return True


def _describe(position: LinkPosition) -> str:
    if position.char is None:
        return f"Line {position.line}"
    return f"Line {position.line}, Col {position.char}"


def format_link_tooltip(parsed: ParsedLink) -> str | None:
    """Describe a link's range for a hover tooltip. The path is not included.

    Returns:
        Text such as ``Lines 10-20`` or ``Line 5, Col 3-15``, with a
        `` (rectangular)`` suffix for block links; None when the link data is
        not displayable (blank path, line or column below 1).
    """
    if parsed is None or not _is_displayable(parsed):
        return None

    start, end = parsed.start, parsed.end
    if start.line == end.line:
        if start.char is None:
            text = f"Line {start.line}"
        elif end.char is None or end.char == start.char:
            text = f"Line {start.line}, Col {start.char}"
        else:
            text = f"Line {start.line}, Col {start.char}-{end.char}"
    elif start.char is None and end.char is None:
        text = f"Lines {start.line}-{end.line}"
    else:
        text = f"{_describe(start)} to {_describe(end)}"

    if parsed.is_rectangular:
        text += " (rectangular)"
    return text
