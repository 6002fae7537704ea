"""Overlap classification between a candidate span and already claimed spans."""

from collections.abc import Sequence


def _classify_overlap(start: int, end: int, occupied: Sequence[tuple[int, int]]) -> tuple[str, list[int]]:
    """Classify ``[start, end)`` against claimed spans.

    Returns:
        ("none", []) when nothing overlaps, ("partial", []) when any span is
        only partly covered, ("encompassing", indices) when the candidate fully
        covers every span it touches.
    """
    encompassed: list[int] = []
    for index, (span_start, span_end) in enumerate(occupied):
        if start < span_end and end > span_start:
            if start <= span_start and end >= span_end:
                encompassed.append(index)
            else:
                return ("partial", [])
    if encompassed:
        return ("encompassing", encompassed)
    return ("none", [])
