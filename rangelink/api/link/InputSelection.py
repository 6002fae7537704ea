"""Input selection dataclass."""

from dataclasses import dataclass

from .Selection import Selection
from .SelectionType import SelectionType


@dataclass(frozen=True)
class InputSelection:
    """Selections to format, together with the shape the caller determined.

    Usually one selection; several for a rectangular (block) selection or a
    multi-cursor selection.
    """

    selections: tuple[Selection, ...]
    selection_type: SelectionType = SelectionType.NORMAL
