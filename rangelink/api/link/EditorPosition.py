"""Editor position dataclass (0-based)."""

from dataclasses import dataclass


@dataclass(frozen=True)
class EditorPosition:
    """A position inside a document as the editor reports it.

    Both ``line`` and ``character`` are 0-based.
    """

    line: int
    character: int
