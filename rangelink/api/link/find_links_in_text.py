"""Document link detection (UNO: single function)."""

import logging

from ._detect_quoted_links import _detect_quoted_links
from ._detect_unquoted_links import _detect_unquoted_links
from .CancellationToken import CancellationToken
from .DelimiterConfig import DelimiterConfig
from .DetectedLink import DetectedLink


def find_links_in_text(
    text: str,
    delimiters: DelimiterConfig,
    logger: logging.Logger | None = None,
    token: CancellationToken | None = None,
) -> list[DetectedLink]:
    """Find all links inside free text.

    Runs an unquoted pass over the link pattern, then a quoted pass for
    ``'...'`` and ``"..."`` segments so that paths with spaces are found.
    Links appear in the order they were found, not sorted by position.

    Args:
        text: Text to scan
        delimiters: Delimiters the links were written with
        logger: Receives debug messages about skipped candidates; without one
            detection is silent
        token: Stops the scan once ``is_cancellation_requested`` is true

    Returns:
        Detected links with their offsets in ``text``
    """
    links, occupied, unquoted_matches, parse_failures = _detect_unquoted_links(text, delimiters, logger, token)
    quoted_candidates, quoted_failures, replacements = _detect_quoted_links(
        text, links, occupied, delimiters, logger, token
    )

    if logger is not None and (links or parse_failures or quoted_candidates):
        logger.debug(
            f"Link detection complete: text_length={len(text)} unquoted_matches={unquoted_matches} "
            f"quoted_candidates={quoted_candidates} replacements={replacements} links={len(links)} "
            f"parse_failures={parse_failures} quoted_parse_failures={quoted_failures}"
        )

    return links
