"""Cancellation token protocol."""

from typing import Protocol


class CancellationToken(Protocol):
    """Anything exposing ``is_cancellation_requested`` can stop a long scan."""

    @property
    def is_cancellation_requested(self) -> bool: ...
