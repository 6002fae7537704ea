"""Link parse API command.

CLI: rangelink link parse <link>
"""

import logging
from collections.abc import Iterator

from ..StageResult import StageResult
from ._load_link_settings import _load_link_settings
from .format_link_position import format_link_position
from .format_link_tooltip import format_link_tooltip
from .parse_link import parse_link

logger = logging.getLogger(__name__)


def cmd_parse(link: str) -> StageResult:
    """Parse a link with the configured delimiters.

    Args:
        link: Link text, optionally wrapped in single quotes.
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        output = {
            "errors": [],
            "warnings": [],
            "link": link,
            "parsed": None,
            "position": "",
            "tooltip": "",
            "error_code": "",
        }

        yield (0.3, "Loading configuration...")
        delimiters, _, config_errors = _load_link_settings()
        if config_errors:
            output["errors"].extend(config_errors)
            yield (1.0, "Complete")
            result_obj.result = "Configuration could not be loaded"
            result_obj.output = output
            result_obj.success = False
            return

        yield (0.6, "Parsing link...")
        result = parse_link(link, delimiters)
        if not result.success:
            logger.debug(f"Parse failed for {link!r}: {result.error}")
            output["errors"].append(result.error.message)
            output["error_code"] = result.error.code.value
            yield (1.0, "Complete")
            result_obj.result = f"Not a valid link: {result.error.message}"
            result_obj.output = output
            result_obj.success = False
            return

        parsed = result.value
        position = format_link_position(parsed.start, parsed.end)
        output["parsed"] = parsed.to_dict()
        output["position"] = position
        output["tooltip"] = format_link_tooltip(parsed) or ""

        yield (1.0, "Complete")
        result_obj.result = f"{parsed.path} at {position}"
        result_obj.output = output
        result_obj.success = True

    return StageResult(
        announce=f"Parsing {link}...",
        progress_callback=do_work,
    )
