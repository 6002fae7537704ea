"""Anchor builder (UNO: single function)."""

from .ComputedSelection import ComputedSelection
from .DelimiterConfig import DelimiterConfig
from .RangeFormat import RangeFormat


def build_anchor(selection: ComputedSelection, delimiters: DelimiterConfig) -> str:
    """Serialize the range part of a link (everything after the hash).

    - LINE_ONLY: ``L10``
    - LINE_RANGE: ``L10-L20``
    - LINE_COLUMN: ``L5C3`` for a single point, else ``L5C3-L5C15``
    - LINE_COLUMN_RANGE: ``L10C5-L20C15``
    """
    line = delimiters.line
    position = delimiters.position
    range_sep = delimiters.range
    fmt = selection.range_format

    if fmt == RangeFormat.LINE_ONLY:
        return f"{line}{selection.start_line}"
    if fmt == RangeFormat.LINE_RANGE:
        return f"{line}{selection.start_line}{range_sep}{line}{selection.end_line}"

    start = f"{line}{selection.start_line}{position}{selection.start_position}"
    if fmt == RangeFormat.LINE_COLUMN and selection.start_position == selection.end_position:
        return start
    end = f"{line}{selection.end_line}{position}{selection.end_position}"
    return f"{start}{range_sep}{end}"
