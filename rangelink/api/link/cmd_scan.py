"""Link scan API command.

CLI: rangelink link scan <file>
"""

import logging
from collections.abc import Iterator
from pathlib import Path

from ..StageResult import StageResult
from ._load_link_settings import _load_link_settings
from .find_links_in_text import find_links_in_text

logger = logging.getLogger(__name__)


def cmd_scan(file: Path) -> StageResult:
    """Find links in a text file, line by line.

    Args:
        file: File to scan.
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        output: dict = {
            "errors": [],
            "warnings": [],
            "file": str(file),
            "links": [],
            "count": 0,
        }

        yield (0.1, "Loading configuration...")
        delimiters, _, config_errors = _load_link_settings()
        if config_errors:
            output["errors"].extend(config_errors)
            yield (1.0, "Complete")
            result_obj.result = "Configuration could not be loaded"
            result_obj.output = output
            result_obj.success = False
            return

        yield (0.2, f"Reading {file}...")
        try:
            text = Path(file).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            output["errors"].append(f"Cannot read {file}: {e}")
            yield (1.0, "Complete")
            result_obj.result = f"Cannot read {file}"
            result_obj.output = output
            result_obj.success = False
            return

        lines = text.splitlines()
        links: list[dict] = []
        for line_num, line in enumerate(lines, start=1):
            for detected in find_links_in_text(line, delimiters, logger=logger):
                links.append(
                    {
                        "line_number": line_num,
                        "column_number": detected.start_index + 1,
                        "link_text": detected.link_text,
                        "parsed": detected.parsed.to_dict(),
                    }
                )
            if line_num % 500 == 0:
                yield (0.2 + 0.7 * line_num / len(lines), f"Scanned {line_num}/{len(lines)} lines...")

        links.sort(key=lambda item: (item["line_number"], item["column_number"]))
        output["links"] = links
        output["count"] = len(links)
        logger.info(f"Scanned {file}: {len(links)} link(s) in {len(lines)} line(s)")

        yield (1.0, "Complete")
        result_obj.result = f"Found {len(links)} link(s) in {file}"
        result_obj.output = output
        result_obj.success = True

    return StageResult(
        announce=f"Scanning {file} for links...",
        progress_callback=do_work,
    )
