"""Parsed link model (UNO: single model)."""

from dataclasses import dataclass
from typing import Any

from .LinkPosition import LinkPosition
from .LinkType import LinkType
from .SelectionType import SelectionType


@dataclass(frozen=True)
class ParsedLink:
    """A link decoded back into a path and a 1-based range.

    ``path`` is the unquoted file path. ``quoted_path`` is
    ``quote_path(path)``: wrapped in single quotes only when the path needs
    quoting, whatever the input looked like.
    """

    path: str
    quoted_path: str
    start: LinkPosition
    end: LinkPosition
    link_type: LinkType = LinkType.REGULAR
    selection_type: SelectionType = SelectionType.NORMAL

    @property
    def is_rectangular(self) -> bool:
        return self.selection_type == SelectionType.RECTANGULAR

    def to_dict(self) -> dict[str, Any]:
        return {
            "path": self.path,
            "quoted_path": self.quoted_path,
            "start": self.start.to_dict(),
            "end": self.end.to_dict(),
            "link_type": self.link_type.value,
            "selection_type": self.selection_type.value,
        }
