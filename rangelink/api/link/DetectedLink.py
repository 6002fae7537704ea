"""Detected link model (UNO: single model)."""

from dataclasses import dataclass
from typing import Any

from .ParsedLink import ParsedLink


@dataclass(frozen=True)
class DetectedLink:
    """A link found inside a larger text.

    ``start_index`` and ``length`` are character offsets into the scanned
    text and include surrounding quotes for quoted links.
    """

    link_text: str
    start_index: int
    length: int
    parsed: ParsedLink

    @property
    def end_index(self) -> int:
        return self.start_index + self.length

    def to_dict(self) -> dict[str, Any]:
        return {
            "link_text": self.link_text,
            "start_index": self.start_index,
            "length": self.length,
            "parsed": self.parsed.to_dict(),
        }
