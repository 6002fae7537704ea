"""Link pattern builder (UNO: single function)."""

import re

from .DelimiterConfig import DelimiterConfig

# A link may not continue a URL or a word.
_NOT_AFTER_URL_CHAR = r"(?<![a-zA-Z0-9:/._?&=%~-])"
_NOT_WEB_SCHEME = r"(?![hH][tT][tT][pP][sS]?://|[fF][tT][pP]://)"


def build_link_pattern(delimiters: DelimiterConfig) -> re.Pattern[str]:
    """Build the unanchored pattern that finds links in free text.

    Groups:
        1: path
        2: hash run (one hash for regular links, two for rectangular)
        3: start line
        4: start column (optional)
        5: end line (optional)
        6: end column (optional)

    Args:
        delimiters: Delimiters the links were written with

    Returns:
        Compiled pattern, suitable for ``finditer``
    """
    line = re.escape(delimiters.line)
    position = re.escape(delimiters.position)
    range_sep = re.escape(delimiters.range)
    hash_sep = re.escape(delimiters.hash)

    if len(delimiters.hash) == 1:
        path = r"(\S+?)"
    else:
        path = rf"((?:(?!{hash_sep})\S)+)"

    return re.compile(
        _NOT_AFTER_URL_CHAR
        + _NOT_WEB_SCHEME
        + path
        + rf"((?:{hash_sep}){{1,2}})"
        + rf"{line}(\d+)(?:{position}(\d+))?"
        + rf"(?:{range_sep}{line}(\d+)(?:{position}(\d+))?)?"
    )
