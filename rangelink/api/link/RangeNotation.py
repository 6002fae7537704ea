"""Range notation enum."""

from enum import Enum


class RangeNotation(str, Enum):
    """Override for the column compaction rules.

    AUTO drops columns only when every selection covers whole lines.
    ENFORCE_FULL_LINE always drops them, ENFORCE_POSITIONS always keeps them.
    Rectangular selections keep columns regardless.
    """

    AUTO = "Auto"
    ENFORCE_FULL_LINE = "EnforceFullLine"
    ENFORCE_POSITIONS = "EnforcePositions"
