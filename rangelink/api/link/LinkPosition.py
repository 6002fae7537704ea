"""Link position dataclass (1-based)."""

from dataclasses import dataclass

from .EditorPosition import EditorPosition


@dataclass(frozen=True)
class LinkPosition:
    """A position as written in a link.

    ``line`` and ``char`` are 1-based. ``char`` is None when the link carries
    no column for this end.
    """

    line: int
    char: int | None = None

    def to_editor_position(self) -> EditorPosition:
        """Convert to a 0-based editor position (missing column means column 0)."""
        character = self.char - 1 if self.char is not None else 0
        return EditorPosition(line=self.line - 1, character=character)

    def to_dict(self) -> dict[str, int | None]:
        return {"line": self.line, "char": self.char}
