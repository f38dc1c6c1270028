"""Protocols for wall-clock time and delayed callbacks."""

from collections.abc import Callable
from typing import Protocol


class Clock(Protocol):
    """Returns the current wall-clock time in seconds."""

    def __call__(self) -> float: ...


class TimerHandle(Protocol):
    """Handle of a scheduled callback."""

    def cancel(self) -> None:
        """Cancel the callback if it has not run yet."""
        ...


class CallLater(Protocol):
    """Schedules a callback after a delay, like ``loop.call_later``."""

    def __call__(self, delay: float, callback: Callable[[], None], /) -> TimerHandle: ...
