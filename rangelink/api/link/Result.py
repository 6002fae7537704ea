"""Result value object for functional error handling."""

from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from .RangeLinkError import RangeLinkError
from .RangeLinkErrorCodes import RangeLinkErrorCodes

T = TypeVar("T")


@dataclass(frozen=True)
class Result(Generic[T]):
    """Either a successful value or a RangeLinkError.

    Build with ``Result.ok(value)`` or ``Result.err(error)`` and check
    ``success`` before reading ``value`` or ``error``.
    """

    success: bool
    _value: T | None = None
    _error: RangeLinkError | None = None

    @classmethod
    def ok(cls, value: T) -> "Result[T]":
        return cls(success=True, _value=value)

    @classmethod
    def err(cls, error: RangeLinkError) -> "Result[T]":
        return cls(success=False, _error=error)

    @property
    def value(self) -> T:
        """The success value.

        Raises:
            RangeLinkError: If this is an error result
        """
        if not self.success:
            raise RangeLinkError(
                code=RangeLinkErrorCodes.RESULT_VALUE_ACCESS_ON_ERROR,
                message="Cannot access value on an error Result. Check .success before accessing .value",
                function_name="Result.value",
            )
        return self._value  # type: ignore[return-value]

    @property
    def error(self) -> RangeLinkError:
        """The error.

        Raises:
            RangeLinkError: If this is a successful result
        """
        if self.success:
            raise RangeLinkError(
                code=RangeLinkErrorCodes.RESULT_ERROR_ACCESS_ON_SUCCESS,
                message="Cannot access error on a successful Result. Check .success before accessing .error",
                function_name="Result.error",
            )
        return self._error  # type: ignore[return-value]

    def to_dict(self) -> dict[str, Any]:
        if self.success:
            return {"success": True, "value": self._value}
        return {"success": False, "error": self._error.to_dict() if self._error else None}
