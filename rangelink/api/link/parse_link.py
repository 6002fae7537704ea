"""Link parser (UNO: single function)."""

import re

from ._build_parse_pattern import _build_parse_pattern
from .DelimiterConfig import DEFAULT_DELIMITERS, DelimiterConfig
from .LinkPosition import LinkPosition
from .LinkType import LinkType
from .MAX_LINK_LENGTH import MAX_LINK_LENGTH
from .ParsedLink import ParsedLink
from .quote_path import quote_path
from .RangeLinkError import RangeLinkError
from .RangeLinkErrorCodes import RangeLinkErrorCodes
from .Result import Result
from .SelectionType import SelectionType
from .unquote_link import unquote_link

_WEB_SCHEME = re.compile(r"^(?:https?|ftp)://", re.IGNORECASE)


def _err(code: RangeLinkErrorCodes, message: str, **details) -> Result[ParsedLink]:
    return Result.err(RangeLinkError(code=code, message=message, function_name="parse_link", details=details))


def parse_link(link: str, delimiters: DelimiterConfig | None = None) -> Result[ParsedLink]:
    """Decode a standalone link into its path and 1-based range.

    The whole (trimmed) input must be a link; use ``find_links_in_text`` to
    look for links inside larger text. A link fully wrapped in single quotes
    is unwrapped first.

    Args:
        link: Link text, e.g. ``src/file.ts#L10C5-L20C15``
        delimiters: Delimiters the link was written with (defaults to ``L``, ``C``, ``-``, ``#``)

    Returns:
        Result with the ParsedLink, or a PARSE_* error. Never raises.
    """
    if len(link) > MAX_LINK_LENGTH:
        return _err(
            RangeLinkErrorCodes.PARSE_LINK_TOO_LONG,
            f"Link exceeds maximum length of {MAX_LINK_LENGTH} characters",
            received=len(link),
            maximum=MAX_LINK_LENGTH,
        )

    if not link or not link.strip():
        return _err(RangeLinkErrorCodes.PARSE_EMPTY_LINK, "Link cannot be empty")

    delimiters = delimiters or DEFAULT_DELIMITERS
    text = unquote_link(link.strip())

    match = _build_parse_pattern(delimiters).match(text)
    if match is None:
        if text.startswith(delimiters.hash):
            return _err(RangeLinkErrorCodes.PARSE_EMPTY_PATH, "Path cannot be empty")
        if delimiters.hash not in text:
            return _err(
                RangeLinkErrorCodes.PARSE_NO_HASH_SEPARATOR,
                f"Link must contain {delimiters.hash} separator",
                hash=delimiters.hash,
            )
        return _err(RangeLinkErrorCodes.PARSE_INVALID_RANGE_FORMAT, "Invalid range format", link=text)

    path, hash_run, start_line_str, start_char_str, end_line_str, end_char_str = match.groups()

    if path == delimiters.hash or not path.strip():
        return _err(RangeLinkErrorCodes.PARSE_EMPTY_PATH, "Path cannot be empty")

    if _WEB_SCHEME.match(path):
        return _err(
            RangeLinkErrorCodes.PARSE_URL_NOT_SUPPORTED,
            "Web URLs are not RangeLinks",
            path=path,
        )

    is_rectangular = len(hash_run) == 2 * len(delimiters.hash)

    start_line = int(start_line_str)
    start_char = int(start_char_str) if start_char_str is not None else None
    if end_line_str is None:
        end_line = start_line
        end_char = start_char
    else:
        end_line = int(end_line_str)
        # Unspecified end column stays None; navigation decides what it means.
        end_char = int(end_char_str) if end_char_str is not None else None

    if start_line < 1 or end_line < 1:
        return _err(
            RangeLinkErrorCodes.PARSE_LINE_BELOW_MINIMUM,
            "Line numbers must be >= 1",
            start_line=start_line,
            end_line=end_line,
            minimum=1,
        )

    if end_line < start_line:
        return _err(
            RangeLinkErrorCodes.PARSE_LINE_BACKWARD,
            "End line cannot be before start line",
            start_line=start_line,
            end_line=end_line,
        )

    for position, char in (("start", start_char), ("end", end_char)):
        if char is not None and char < 1:
            return _err(
                RangeLinkErrorCodes.PARSE_CHAR_BELOW_MINIMUM,
                f"{position.capitalize()} character must be >= 1",
                received=char,
                minimum=1,
                position=position,
            )

    if start_line == end_line and start_char is not None and end_char is not None and end_char < start_char:
        return _err(
            RangeLinkErrorCodes.PARSE_CHAR_BACKWARD_SAME_LINE,
            "End character cannot be before start character on the same line",
            start_char=start_char,
            end_char=end_char,
            line=start_line,
        )

    return Result.ok(
        ParsedLink(
            path=path,
            quoted_path=quote_path(path),
            start=LinkPosition(line=start_line, char=start_char),
            end=LinkPosition(line=end_line, char=end_char),
            link_type=LinkType.RECTANGULAR if is_rectangular else LinkType.REGULAR,
            selection_type=SelectionType.RECTANGULAR if is_rectangular else SelectionType.NORMAL,
        )
    )
