"""Anchored pattern used to parse a standalone link."""

import re

from .DelimiterConfig import DelimiterConfig


def _build_parse_pattern(delimiters: DelimiterConfig) -> re.Pattern[str]:
    """Same grammar as ``build_link_pattern`` but anchored, with spaces allowed in the path.

    The path is lazy, but the pattern must reach the end of the input, so file
    names containing the hash (``file#1.ts#L10``) still parse.
    """
    line = re.escape(delimiters.line)
    position = re.escape(delimiters.position)
    range_sep = re.escape(delimiters.range)
    hash_sep = re.escape(delimiters.hash)

    if len(delimiters.hash) == 1:
        path = r"(.+?)"
    else:
        path = rf"((?:(?!{hash_sep}).)+)"

    return re.compile(
        "^"
        + path
        + rf"((?:{hash_sep}){{1,2}})"
        + rf"{line}(\d+)(?:{position}(\d+))?"
        + rf"(?:{range_sep}{line}(\d+)(?:{position}(\d+))?)?"
        + "$"
    )
