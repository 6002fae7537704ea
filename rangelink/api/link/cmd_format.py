"""Link format API command.

CLI: rangelink link format <path> <range>... [--notation auto|full-line|positions] [--portable]
"""

import logging
from collections.abc import Iterator

from ..StageResult import StageResult
from ._load_link_settings import _load_link_settings
from ._parse_range_arg import _parse_range_arg
from .format_link import format_link
from .RangeNotation import RangeNotation
from .SelectionType import SelectionType
from .to_input_selection import to_input_selection

logger = logging.getLogger(__name__)


def cmd_format(
    path: str,
    ranges: list[str],
    notation: RangeNotation | None = None,
    portable: bool = False,
) -> StageResult:
    """Format a link for one or more ranges in a file.

    Args:
        path: File path to put in the link.
        ranges: 1-based ranges ``LINE[:COL][-LINE[:COL]]``. Several aligned
            single-line ranges on consecutive lines form a rectangular link.
        notation: Override for the configured column compaction.
        portable: Append the delimiters to the link so it decodes under any
            configuration.
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        output = {
            "errors": [],
            "warnings": [],
            "path": path,
            "link": "",
            "raw_link": "",
            "link_type": "",
            "selection_type": "",
            "range_format": "",
            "error_code": "",
        }

        yield (0.2, "Loading configuration...")
        delimiters, configured_notation, config_errors = _load_link_settings()
        if config_errors:
            output["errors"].extend(config_errors)
            yield (1.0, "Complete")
            result_obj.result = "Configuration could not be loaded"
            result_obj.output = output
            result_obj.success = False
            return

        yield (0.4, "Parsing ranges...")
        try:
            selections = [_parse_range_arg(r) for r in ranges]
        except ValueError as e:
            output["errors"].append(str(e))
            yield (1.0, "Complete")
            result_obj.result = "Invalid range"
            result_obj.output = output
            result_obj.success = False
            return

        yield (0.7, "Formatting link...")
        input_selection = to_input_selection(selections)
        result = format_link(path, input_selection, delimiters, notation or configured_notation, portable=portable)
        if not result.success:
            logger.debug(f"Formatting failed for {path}: {result.error}")
            output["errors"].append(result.error.message)
            output["error_code"] = result.error.code.value
            yield (1.0, "Complete")
            result_obj.result = f"Could not format link: {result.error.message}"
            result_obj.output = output
            result_obj.success = False
            return

        formatted = result.value
        if len(selections) > 1 and input_selection.selection_type == SelectionType.NORMAL:
            output["warnings"].append("Ranges are not a rectangular block; linking their bounding range")
        output.update(
            {
                "link": formatted.link,
                "raw_link": formatted.raw_link,
                "link_type": formatted.link_type.value,
                "selection_type": formatted.selection_type.value,
                "range_format": formatted.range_format.value,
            }
        )

        yield (1.0, "Complete")
        result_obj.result = formatted.link
        result_obj.output = output
        result_obj.success = True

    return StageResult(
        announce=f"Formatting link for {path}...",
        progress_callback=do_work,
    )
