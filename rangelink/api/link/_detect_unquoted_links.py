"""Unquoted link detection pass."""

import logging

from .build_link_pattern import build_link_pattern
from .CancellationToken import CancellationToken
from .DelimiterConfig import DelimiterConfig
from .DetectedLink import DetectedLink
from .parse_link import parse_link


def _detect_unquoted_links(
    text: str,
    delimiters: DelimiterConfig,
    logger: logging.Logger | None,
    token: CancellationToken | None = None,
) -> tuple[list[DetectedLink], list[tuple[int, int]], int, int]:
    """Find every pattern match that also parses as a link.

    Returns:
        (links, occupied spans, match count, parse failure count)
    """
    links: list[DetectedLink] = []
    occupied: list[tuple[int, int]] = []
    matches = list(build_link_pattern(delimiters).finditer(text))
    parse_failures = 0

    for match in matches:
        if token is not None and token.is_cancellation_requested:
            break
        link_text = match.group(0)
        result = parse_link(link_text, delimiters)
        if not result.success:
            parse_failures += 1
            if logger is not None:
                logger.debug(f"Skipping link that failed to parse: {link_text!r} ({result.error})")
            continue
        links.append(
            DetectedLink(link_text=link_text, start_index=match.start(), length=len(link_text), parsed=result.value)
        )
        occupied.append((match.start(), match.end()))

    return links, occupied, len(matches), parse_failures
