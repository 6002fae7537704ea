"""Parse a 1-based command line range into a Selection."""

import re

from .Selection import Selection

_RANGE_ARG = re.compile(r"^(\d+)(?::(\d+))?(?:-(\d+)(?::(\d+))?)?$")


def _parse_range_arg(text: str) -> Selection:
    """Parse ``LINE[:COL][-LINE[:COL]]`` (1-based) into a 0-based Selection.

    A range without columns selects whole lines. Columns must be given on
    both ends or on neither; a single ``LINE:COL`` is a point.

    Raises:
        ValueError: If the text is not a valid range
    """
    match = _RANGE_ARG.match(text.strip())
    if match is None:
        raise ValueError(f"Invalid range '{text}': expected LINE[:COL][-LINE[:COL]]")

    start_line_str, start_col_str, end_line_str, end_col_str = match.groups()
    start_line = int(start_line_str)
    end_line = int(end_line_str) if end_line_str is not None else start_line

    if start_line < 1 or end_line < 1:
        raise ValueError(f"Invalid range '{text}': lines are 1-based")

    if start_col_str is None and end_col_str is None:
        return Selection.from_bounds(start_line - 1, 0, end_line - 1, 0, is_whole_line=True)

    if end_line_str is None:
        end_col_str = start_col_str
    if start_col_str is None or end_col_str is None:
        raise ValueError(f"Invalid range '{text}': give columns on both ends or on neither")

    start_col = int(start_col_str)
    end_col = int(end_col_str)
    if start_col < 1 or end_col < 1:
        raise ValueError(f"Invalid range '{text}': columns are 1-based")

    return Selection.from_bounds(start_line - 1, start_col - 1, end_line - 1, end_col - 1)
