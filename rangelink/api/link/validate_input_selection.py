"""Input selection validation (UNO: single function)."""

from .InputSelection import InputSelection
from .RangeLinkError import RangeLinkError
from .RangeLinkErrorCodes import RangeLinkErrorCodes
from .SelectionType import SelectionType

_FUNCTION_NAME = "validate_input_selection"


def _fail(code: RangeLinkErrorCodes, message: str, **details) -> RangeLinkError:
    return RangeLinkError(code=code, message=message, function_name=_FUNCTION_NAME, details=details)


def validate_input_selection(input_selection: InputSelection) -> None:
    """Check the structure of a selection before computing a range from it.

    Raises:
        RangeLinkError: With a SELECTION_* code describing the first problem found
    """
    selections = input_selection.selections
    selection_type = input_selection.selection_type

    if len(selections) == 0:
        raise _fail(RangeLinkErrorCodes.SELECTION_EMPTY, "Selections must not be empty")

    if selection_type not in (SelectionType.NORMAL, SelectionType.RECTANGULAR):
        raise _fail(
            RangeLinkErrorCodes.SELECTION_UNKNOWN_TYPE,
            f"Unknown selection type: {selection_type!r}",
            selection_type=str(selection_type),
        )

    for index, sel in enumerate(selections):
        if min(sel.start.line, sel.end.line, sel.start.character, sel.end.character) < 0:
            raise _fail(
                RangeLinkErrorCodes.SELECTION_NEGATIVE_COORDINATES,
                f"Negative coordinates not allowed (selection {index}: "
                f"{sel.start.line}:{sel.start.character}-{sel.end.line}:{sel.end.character})",
                selection_index=index,
            )
        if sel.start.line > sel.end.line:
            raise _fail(
                RangeLinkErrorCodes.SELECTION_BACKWARD_LINE,
                f"Backward selection not allowed (start line {sel.start.line} > end line {sel.end.line})",
                selection_index=index,
                start_line=sel.start.line,
                end_line=sel.end.line,
            )
        if sel.start.line == sel.end.line and sel.start.character > sel.end.character:
            raise _fail(
                RangeLinkErrorCodes.SELECTION_BACKWARD_CHARACTER,
                f"Backward character selection not allowed on line {sel.start.line} "
                f"({sel.start.character} > {sel.end.character})",
                selection_index=index,
                start_char=sel.start.character,
                end_char=sel.end.character,
            )

    if selection_type == SelectionType.RECTANGULAR:
        _validate_rectangular(input_selection)


def _validate_rectangular(input_selection: InputSelection) -> None:
    selections = input_selection.selections
    first = selections[0]

    for index, sel in enumerate(selections):
        if sel.start.line != sel.end.line:
            raise _fail(
                RangeLinkErrorCodes.SELECTION_RECTANGULAR_MULTILINE,
                f"Rectangular selections must be single-line (selection {index} spans lines "
                f"{sel.start.line}-{sel.end.line})",
                selection_index=index,
            )

    for index, sel in enumerate(selections[1:], start=1):
        if sel.start.character != first.start.character or sel.end.character != first.end.character:
            raise _fail(
                RangeLinkErrorCodes.SELECTION_RECTANGULAR_MISMATCHED_COLUMNS,
                f"Rectangular selections must share a column range (expected "
                f"{first.start.character}-{first.end.character}, got "
                f"{sel.start.character}-{sel.end.character} at selection {index})",
                selection_index=index,
            )

    for index in range(1, len(selections)):
        previous, current = selections[index - 1], selections[index]
        if current.start.line < previous.start.line:
            raise _fail(
                RangeLinkErrorCodes.SELECTION_RECTANGULAR_UNSORTED,
                f"Rectangular selections must be sorted by line (line {current.start.line} "
                f"comes after line {previous.start.line})",
                selection_index=index,
            )

    for index in range(1, len(selections)):
        previous, current = selections[index - 1], selections[index]
        if current.start.line != previous.start.line + 1:
            raise _fail(
                RangeLinkErrorCodes.SELECTION_RECTANGULAR_NON_CONTIGUOUS,
                f"Rectangular selections must be on contiguous lines (gap between line "
                f"{previous.start.line} and {current.start.line})",
                selection_index=index,
                gap=current.start.line - previous.start.line - 1,
            )
