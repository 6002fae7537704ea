"""Single delimiter validation (UNO: single function)."""

import re

from .RangeLinkError import RangeLinkError
from .RangeLinkErrorCodes import RangeLinkErrorCodes
from .RESERVED_CHARS import RESERVED_CHARS
from .Result import Result


def _err(code: RangeLinkErrorCodes, message: str, **details) -> Result[None]:
    return Result.err(RangeLinkError(code=code, message=message, function_name="validate_delimiter", details=details))


def validate_delimiter(value: str, is_hash: bool = False) -> Result[None]:
    """Check one delimiter value.

    Args:
        value: Delimiter to check
        is_hash: The hash delimiter must be exactly one character

    Returns:
        Ok(None), or a CONFIG_* error for the first rule broken
    """
    if not value or not value.strip():
        return _err(RangeLinkErrorCodes.CONFIG_DELIMITER_EMPTY, "Delimiter must not be empty", value=value)

    if is_hash and len(value) != 1:
        return _err(
            RangeLinkErrorCodes.CONFIG_HASH_NOT_SINGLE_CHAR,
            "Hash delimiter must be exactly one character",
            value=value,
            actual_length=len(value),
        )

    if re.search(r"\d", value):
        return _err(RangeLinkErrorCodes.CONFIG_DELIMITER_DIGITS, "Delimiter cannot contain digits", value=value)

    if re.search(r"\s", value):
        return _err(
            RangeLinkErrorCodes.CONFIG_DELIMITER_WHITESPACE, "Delimiter cannot contain whitespace", value=value
        )

    for char in RESERVED_CHARS:
        if char in value:
            return _err(
                RangeLinkErrorCodes.CONFIG_DELIMITER_RESERVED,
                f"Delimiter cannot contain reserved character '{char}'",
                value=value,
                reserved_char=char,
            )

    return Result.ok(None)
