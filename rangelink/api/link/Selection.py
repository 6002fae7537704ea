"""Selection dataclass (UNO: single model)."""

from dataclasses import dataclass

from .EditorPosition import EditorPosition
from .SelectionCoverage import SelectionCoverage


@dataclass(frozen=True)
class Selection:
    """One raw selection range reported by the editor (0-based)."""

    start: EditorPosition
    end: EditorPosition
    coverage: SelectionCoverage = SelectionCoverage.PARTIAL_LINE

    @property
    def is_whole_line(self) -> bool:
        return self.coverage == SelectionCoverage.FULL_LINE

    @classmethod
    def from_bounds(
        cls,
        start_line: int,
        start_char: int,
        end_line: int,
        end_char: int,
        is_whole_line: bool = False,
    ) -> "Selection":
        """Build a selection from the flat shape editors hand out."""
        return cls(
            start=EditorPosition(start_line, start_char),
            end=EditorPosition(end_line, end_char),
            coverage=SelectionCoverage.FULL_LINE if is_whole_line else SelectionCoverage.PARTIAL_LINE,
        )
