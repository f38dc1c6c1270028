"""Log source port."""

from abc import ABC, abstractmethod
from collections.abc import Callable

DataCallback = Callable[[bytes], None]
CloseCallback = Callable[[], None]


class LogSourceError(Exception):
    """Raised when the log content cannot be read."""


class LogSource(ABC):
    """Port for reading a server log, once in full and then live."""

    @abstractmethod
    async def read_all(self, on_data: DataCallback) -> None:
        """Deliver the complete current log content, returning when done.

        Raises:
            LogSourceError: If the log cannot be read.
        """
        ...

    @abstractmethod
    async def follow(self, on_data: DataCallback, on_close: CloseCallback) -> None:
        """Start delivering content appended from now on.

        Returns once following has started. ``on_close`` is called if the
        stream ends without ``cancel`` having been called.
        """
        ...

    @abstractmethod
    async def cancel(self) -> None:
        """Stop following. Safe to call when not following."""
        ...
