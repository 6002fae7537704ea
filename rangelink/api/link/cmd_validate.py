"""Link validate API command.

CLI: rangelink link validate [--line L] [--position C] [--range -] [--hash #]
"""

from collections.abc import Iterator

from ..StageResult import StageResult
from ._load_link_settings import _load_link_settings
from .DelimiterConfig import DelimiterConfig
from .validate_delimiter_config import validate_delimiter_config


def cmd_validate(
    line: str | None = None,
    position: str | None = None,
    range: str | None = None,
    hash: str | None = None,
) -> StageResult:
    """Check that delimiters can be used to write unambiguous links.

    Without arguments the configured delimiters are checked. Each given
    argument replaces the corresponding default delimiter.
    """
    overrides = {
        name: value
        for name, value in (("line", line), ("position", position), ("range", range), ("hash", hash))
        if value is not None
    }

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        if overrides:
            delimiters = DelimiterConfig(**overrides)
            errors: list[str] = []
        else:
            yield (0.3, "Loading configuration...")
            delimiters, _, errors = _load_link_settings()

        output = {
            "errors": errors,
            "warnings": [],
            "delimiters": delimiters.model_dump(),
            "valid": False,
            "error_code": "",
        }
        if errors:
            yield (1.0, "Complete")
            result_obj.result = "Configuration could not be loaded"
            result_obj.output = output
            result_obj.success = False
            return

        yield (0.7, "Validating delimiters...")
        result = validate_delimiter_config(delimiters)

        yield (1.0, "Complete")
        if result.success:
            output["valid"] = True
            result_obj.result = "Delimiters are valid"
            result_obj.success = True
        else:
            output["errors"].append(result.error.message)
            output["error_code"] = result.error.code.value
            result_obj.result = f"Invalid delimiters: {result.error.message}"
            result_obj.success = False
        result_obj.output = output

    return StageResult(
        announce="Validating delimiters...",
        progress_callback=do_work,
    )
