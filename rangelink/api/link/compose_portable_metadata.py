"""Portable link metadata (UNO: single function)."""

from .DelimiterConfig import DelimiterConfig
from .PORTABLE_METADATA_SEPARATOR import PORTABLE_METADATA_SEPARATOR


def compose_portable_metadata(delimiters: DelimiterConfig, include_position: bool) -> str:
    """Spell out the delimiters a link was written with.

    Appended to a portable link so a reader with a different configuration
    can still decode it: ``~#~L~-~`` for line-only links, ``~#~L~-~C~`` when
    the link carries columns.
    """
    fields = [delimiters.hash, delimiters.line, delimiters.range]
    if include_position:
        fields.append(delimiters.position)
    sep = PORTABLE_METADATA_SEPARATOR
    return sep + sep.join(fields) + sep
