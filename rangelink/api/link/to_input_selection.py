"""Build an InputSelection from raw editor selections (UNO: single function)."""

from collections.abc import Sequence

from .InputSelection import InputSelection
from .is_rectangular_selection import is_rectangular_selection
from .Selection import Selection
from .SelectionType import SelectionType


def to_input_selection(selections: Sequence[Selection]) -> InputSelection:
    """Classify the selections and package them for formatting.

    Rectangular selections are sorted by line. Anything else stays Normal,
    and the formatter links the bounding range of all selections. Whole-line
    selections never form a block: their columns carry no information.
    """
    if not any(s.is_whole_line for s in selections) and is_rectangular_selection(selections):
        ordered = tuple(sorted(selections, key=lambda s: s.start.line))
        return InputSelection(selections=ordered, selection_type=SelectionType.RECTANGULAR)
    return InputSelection(selections=tuple(selections), selection_type=SelectionType.NORMAL)
