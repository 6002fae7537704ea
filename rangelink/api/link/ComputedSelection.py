"""Computed selection dataclass."""

from dataclasses import dataclass

from .RangeFormat import RangeFormat
from .SelectionType import SelectionType


@dataclass(frozen=True)
class ComputedSelection:
    """Bounding range of a selection, 1-based, ready to be written as a link.

    Positions are None for the line-only formats.
    """

    start_line: int
    end_line: int
    start_position: int | None
    end_position: int | None
    range_format: RangeFormat
    selection_type: SelectionType = SelectionType.NORMAL
