"""Delimiter configuration validation (UNO: single function)."""

from itertools import permutations

from .DelimiterConfig import DelimiterConfig
from .RangeLinkError import RangeLinkError
from .RangeLinkErrorCodes import RangeLinkErrorCodes
from .Result import Result
from .validate_delimiter import validate_delimiter


def validate_delimiter_config(delimiters: DelimiterConfig) -> Result[None]:
    """Check that a set of delimiters can be used to write unambiguous links.

    Each delimiter must pass ``validate_delimiter``; all four must be unique
    ignoring case, and none may contain another.
    """
    for name in ("line", "position", "range", "hash"):
        result = validate_delimiter(getattr(delimiters, name), is_hash=name == "hash")
        if not result.success:
            error = result.error
            error.details["field"] = name
            return result

    lowered = [value.lower() for value in delimiters.values()]
    if len(set(lowered)) != len(lowered):
        return Result.err(
            RangeLinkError(
                code=RangeLinkErrorCodes.CONFIG_DELIMITER_NOT_UNIQUE,
                message="Delimiters must be unique (case-insensitive)",
                function_name="validate_delimiter_config",
                details={"delimiters": delimiters.model_dump()},
            )
        )

    for outer, inner in permutations(lowered, 2):
        if inner in outer:
            return Result.err(
                RangeLinkError(
                    code=RangeLinkErrorCodes.CONFIG_DELIMITER_SUBSTRING_CONFLICT,
                    message=f"Delimiter '{inner}' is contained in delimiter '{outer}'",
                    function_name="validate_delimiter_config",
                    details={"delimiters": delimiters.model_dump()},
                )
            )

    return Result.ok(None)
