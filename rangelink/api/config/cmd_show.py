"""Show configuration command.

CLI: rangelink config show [SECTION]
"""

from collections.abc import Iterator
from typing import Any

from ..StageResult import StageResult
from .get_config_path import get_config_path
from .RangeLinkConfig import RangeLinkConfig


def cmd_show(section: str = "") -> StageResult:
    """Show one configuration section, or list the section names.

    Defaults are shown when no configuration file exists.

    Args:
        section: Section name; empty string lists the available sections.
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        config_path = get_config_path()
        exists = config_path.exists()
        output: dict[str, Any] = {
            "errors": [],
            "warnings": [],
            "section": section,
            "content": {},
            "config_path": str(config_path),
            "exists": exists,
        }

        yield (0.3, "Loading configuration...")
        try:
            config = RangeLinkConfig.load()
        except ValueError as e:
            output["errors"].append(str(e))
            yield (1.0, "Complete")
            result_obj.result = "Configuration could not be loaded"
            result_obj.output = output
            result_obj.success = False
            return

        if not exists:
            output["warnings"].append(f"No configuration file at {config_path}, showing defaults")

        yield (0.6, "Reading sections...")
        sections = config.to_dict()

        if not section:
            output["content"] = {"sections": list(sections)}
            result_obj.result = f"Found {len(sections)} section(s)"
            result_obj.success = True
        elif section not in sections:
            output["errors"].append(f"Unknown section: {section}")
            result_obj.result = f"Section '{section}' not found"
            result_obj.success = False
        else:
            value = sections[section]
            output["content"] = value if isinstance(value, dict) else {"value": value}
            result_obj.result = f"Retrieved configuration for '{section}'"
            result_obj.success = True

        yield (1.0, "Complete")
        result_obj.output = output

    announce = f"Showing configuration for section '{section}'..." if section else "Listing configuration sections..."
    return StageResult(announce=announce, progress_callback=do_work)
