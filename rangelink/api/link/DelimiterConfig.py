"""Delimiter configuration."""

from pydantic import BaseModel, ConfigDict, Field


class DelimiterConfig(BaseModel):
    """Markers used to write and recognize links.

    Formatting and parsing must use the same configuration. The codec does not
    validate the values; see ``validate_delimiter_config``.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    line: str = Field("L", description="Line marker")
    position: str = Field("C", description="Column marker")
    range: str = Field("-", description="Separator between start and end")
    hash: str = Field("#", description="Separator between path and anchor")

    def values(self) -> list[str]:
        """Return the delimiters as a list (line, position, hash, range)."""
        return [self.line, self.position, self.hash, self.range]


DEFAULT_DELIMITERS = DelimiterConfig()
