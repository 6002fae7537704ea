"""Output schemas for link commands."""

from typing import Any

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class LinkFormatOutput(BaseOutputSchema):
    """Output schema for link format command."""

    path: str = Field(..., description="File path the link points to")
    link: str = Field(..., description="Link text, quoted when the path needs it; empty string on failure")
    raw_link: str = Field(..., description="Unquoted link text; empty string on failure")
    link_type: str = Field(..., description="Regular, Rectangular or Portable; empty string on failure")
    selection_type: str = Field(..., description="Normal or Rectangular; empty string on failure")
    range_format: str = Field(..., description="LineOnly, LineRange, LineColumn or LineColumnRange; empty string on failure")
    error_code: str = Field(..., description="RangeLink error code, empty string on success")


class LinkParseOutput(BaseOutputSchema):
    """Output schema for link parse command.

    Output structure:
    - link: str - the input link
    - parsed: dict | None - path, quoted_path, start, end, link_type, selection_type; None on failure
    - position: str - compact position (e.g. "10:5-20:15"), empty string on failure
    - tooltip: str - human description (e.g. "Lines 10-20"), empty string on failure
    - error_code: str - RangeLink error code, empty string on success
    """

    link: str = Field(..., description="Input link text")
    parsed: dict[str, Any] | None = Field(..., description="Parsed link, None on failure")
    position: str = Field(..., description="Compact position display, empty string on failure")
    tooltip: str = Field(..., description="Human-readable range description, empty string on failure")
    error_code: str = Field(..., description="RangeLink error code, empty string on success")


class LinkScanOutput(BaseOutputSchema):
    """Output schema for link scan command."""

    file: str = Field(..., description="Scanned file path")
    links: list[dict[str, Any]] = Field(
        ..., description="Detected links with line_number, column_number, link_text and parsed fields"
    )
    count: int = Field(..., description="Number of detected links")


class LinkValidateOutput(BaseOutputSchema):
    """Output schema for link validate command."""

    delimiters: dict[str, str] = Field(..., description="Delimiters that were checked")
    valid: bool = Field(..., description="True when the delimiters can be used")
    error_code: str = Field(..., description="RangeLink error code, empty string when valid")


register_output_schema("link", "format", LinkFormatOutput)
register_output_schema("link", "parse", LinkParseOutput)
register_output_schema("link", "scan", LinkScanOutput)
register_output_schema("link", "validate", LinkValidateOutput)
