"""Range format enum."""

from enum import Enum


class RangeFormat(str, Enum):
    """How much positional detail a link carries.

    - LINE_ONLY: ``L10``
    - LINE_RANGE: ``L10-L20``
    - LINE_COLUMN: ``L5C3`` or ``L5C3-L5C15``
    - LINE_COLUMN_RANGE: ``L10C5-L20C15``
    """

    LINE_ONLY = "LineOnly"
    LINE_RANGE = "LineRange"
    LINE_COLUMN = "LineColumn"
    LINE_COLUMN_RANGE = "LineColumnRange"

    @property
    def has_positions(self) -> bool:
        return self in (RangeFormat.LINE_COLUMN, RangeFormat.LINE_COLUMN_RANGE)
