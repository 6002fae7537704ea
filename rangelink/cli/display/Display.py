"""Display interface for command output."""

from abc import ABC, abstractmethod
from typing import Any


class Display(ABC):
    """What the stage runner needs to show a command's four stages."""

    @abstractmethod
    def status(self, message: str, **kwargs) -> None:
        """Announce a command."""

    @abstractmethod
    def success(self, message: str, **kwargs) -> None:
        """Report a successful result."""

    @abstractmethod
    def error(self, message: str, **kwargs) -> None:
        """Report a failed result."""

    @abstractmethod
    def warning(self, message: str, **kwargs) -> None:
        """Report a warning."""

    @abstractmethod
    def info(self, message: str, **kwargs) -> None:
        """Show a progress or informational line."""

    @abstractmethod
    def json_output(self, data: Any, **kwargs) -> None:
        """Write the command output document."""
