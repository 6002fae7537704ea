"""Quoted link detection pass."""

import logging
import re

from ._classify_overlap import _classify_overlap
from .CancellationToken import CancellationToken
from .DelimiterConfig import DelimiterConfig
from .DetectedLink import DetectedLink
from .parse_link import parse_link

_QUOTED_SEGMENT = re.compile(r"(['\"])([^'\"]+)\1")


def _detect_quoted_links(
    text: str,
    links: list[DetectedLink],
    occupied: list[tuple[int, int]],
    delimiters: DelimiterConfig,
    logger: logging.Logger | None,
    token: CancellationToken | None = None,
) -> tuple[int, int, int]:
    """Add links written inside quotes, so paths with spaces are found.

    ``links`` and ``occupied`` are updated in place. A quoted link that fully
    covers earlier unquoted matches replaces them; one that partly overlaps
    a match is skipped.

    Returns:
        (candidate count, parse failure count, replacement count)
    """
    candidates = 0
    parse_failures = 0
    replacements = 0

    for match in _QUOTED_SEGMENT.finditer(text):
        if token is not None and token.is_cancellation_requested:
            break
        candidates += 1

        inner = match.group(2)
        start, end = match.start(), match.end()

        kind, encompassed = _classify_overlap(start, end, occupied)
        if kind == "partial":
            continue

        result = parse_link(inner, delimiters)
        if not result.success:
            parse_failures += 1
            continue

        if kind == "encompassing":
            for index in reversed(encompassed):
                del links[index]
                del occupied[index]
            replacements += len(encompassed)
            if logger is not None:
                logger.debug(f"Quoted link {inner!r} replaced {len(encompassed)} unquoted match(es)")

        links.append(DetectedLink(link_text=inner, start_index=start, length=end - start, parsed=result.value))
        occupied.append((start, end))

    return candidates, parse_failures, replacements
