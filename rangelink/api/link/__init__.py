"""Link API domain: the RangeLink codec.

Format selections as links, parse links back, and find links in text.
Command functions (``cmd_*``) live in their own modules and are imported
directly by the CLI.
"""

from .build_link_pattern import build_link_pattern
from .CancellationToken import CancellationToken
from .compose_portable_metadata import compose_portable_metadata
from .compute_range_spec import compute_range_spec
from .ComputedSelection import ComputedSelection
from .DelimiterConfig import DEFAULT_DELIMITERS, DelimiterConfig
from .DetectedLink import DetectedLink
from .EditorPosition import EditorPosition
from .find_links_in_text import find_links_in_text
from .format_link import format_link
from .format_link_position import format_link_position
from .format_link_tooltip import format_link_tooltip
from .FormattedLink import FormattedLink
from .InputSelection import InputSelection
from .is_rectangular_selection import is_rectangular_selection
from .LinkPosition import LinkPosition
from .LinkType import LinkType
from .MAX_LINK_LENGTH import MAX_LINK_LENGTH
from .needs_quoting import needs_quoting
from .parse_link import parse_link
from .ParsedLink import ParsedLink
from .PORTABLE_METADATA_SEPARATOR import PORTABLE_METADATA_SEPARATOR
from .quote_link import quote_link
from .quote_path import quote_path
from .RangeFormat import RangeFormat
from .RangeLinkError import RangeLinkError
from .RangeLinkErrorCodes import RangeLinkErrorCodes
from .RangeNotation import RangeNotation
from .Result import Result
from .Selection import Selection
from .SelectionCoverage import SelectionCoverage
from .SelectionType import SelectionType
from .to_input_selection import to_input_selection
from .unquote_link import unquote_link
from .validate_delimiter import validate_delimiter
from .validate_delimiter_config import validate_delimiter_config
from .validate_input_selection import validate_input_selection

__all__ = [
    "DEFAULT_DELIMITERS",
    "MAX_LINK_LENGTH",
    "PORTABLE_METADATA_SEPARATOR",
    "CancellationToken",
    "ComputedSelection",
    "DelimiterConfig",
    "DetectedLink",
    "EditorPosition",
    "FormattedLink",
    "InputSelection",
    "LinkPosition",
    "LinkType",
    "ParsedLink",
    "RangeFormat",
    "RangeLinkError",
    "RangeLinkErrorCodes",
    "RangeNotation",
    "Result",
    "Selection",
    "SelectionCoverage",
    "SelectionType",
    "build_link_pattern",
    "compose_portable_metadata",
    "compute_range_spec",
    "find_links_in_text",
    "format_link",
    "format_link_position",
    "format_link_tooltip",
    "is_rectangular_selection",
    "needs_quoting",
    "parse_link",
    "quote_link",
    "quote_path",
    "to_input_selection",
    "unquote_link",
    "validate_delimiter",
    "validate_delimiter_config",
    "validate_input_selection",
]
