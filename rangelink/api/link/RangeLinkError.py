"""Base error for all RangeLink failures."""

from typing import Any

from .RangeLinkErrorCodes import RangeLinkErrorCodes


class RangeLinkError(Exception):
    """Structured error with a code, the failing function and context details.

    Parse and format failures are returned inside a ``Result`` rather than
    raised; callers turn them into user-facing messages.
    """

    def __init__(
        self,
        code: RangeLinkErrorCodes,
        message: str,
        function_name: str,
        details: dict[str, Any] | None = None,
        cause: BaseException | None = None,
    ):
        super().__init__(message)
        self.code = code
        self.message = message
        self.function_name = function_name
        self.details = details or {}
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        return f"[{self.code.value}] {self.message}"

    def __repr__(self) -> str:
        return f"RangeLinkError(code={self.code.value!r}, message={self.message!r}, function_name={self.function_name!r})"

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-friendly dict for command output and logs."""
        return {
            "code": self.code.value,
            "message": self.message,
            "function_name": self.function_name,
            "details": self.details,
        }
