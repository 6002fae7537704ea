"""Formatted link model (UNO: single model)."""

from dataclasses import dataclass
from typing import Any

from .ComputedSelection import ComputedSelection
from .DelimiterConfig import DelimiterConfig
from .LinkType import LinkType
from .RangeFormat import RangeFormat
from .SelectionType import SelectionType


@dataclass(frozen=True)
class FormattedLink:
    """A link produced from a selection, with the data used to build it.

    ``raw_link`` is the plain encoding. ``link`` is the same text, wrapped in
    single quotes when the path contains characters that need quoting.
    """

    link: str
    raw_link: str
    link_type: LinkType
    delimiters: DelimiterConfig
    computed_selection: ComputedSelection
    range_format: RangeFormat
    selection_type: SelectionType

    def to_dict(self) -> dict[str, Any]:
        selection = self.computed_selection
        return {
            "link": self.link,
            "raw_link": self.raw_link,
            "link_type": self.link_type.value,
            "range_format": self.range_format.value,
            "selection_type": self.selection_type.value,
            "start_line": selection.start_line,
            "end_line": selection.end_line,
            "start_position": selection.start_position,
            "end_position": selection.end_position,
        }
