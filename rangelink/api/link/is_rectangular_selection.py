"""Rectangular selection classifier (UNO: single function)."""

from collections.abc import Sequence

from .Selection import Selection


def is_rectangular_selection(selections: Sequence[Selection]) -> bool:
    """Detect whether several selections form a rectangular (block) selection.

    Requires at least two selections sharing the same start and end
    characters, whose start lines form a contiguous run once sorted.
    Two same-column cursors on non-adjacent lines are not a block.
    """
    if len(selections) < 2:
        return False

    first_start_char = selections[0].start.character
    first_end_char = selections[0].end.character
    if any(s.start.character != first_start_char or s.end.character != first_end_char for s in selections):
        return False

    lines = sorted(s.start.line for s in selections)
    return all(current == previous + 1 for previous, current in zip(lines, lines[1:], strict=False))
