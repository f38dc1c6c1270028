"""Presence store contract (protocol)."""

from collections.abc import Iterator, Mapping
from typing import Protocol


class PresenceStoreProtocol(Protocol):
    """Protocol for the identity -> location mapping of connected users."""

    def set(self, identity: str, location: str) -> None:
        """Record that identity is present at location."""
        ...

    def remove(self, identity: str) -> None:
        """Forget identity. Unknown identities are ignored."""
        ...

    def size(self) -> int:
        """Return the number of present users."""
        ...

    def snapshot(self) -> Mapping[str, str]:
        """Return an independent, read-only copy of the current state."""
        ...

    def items(self) -> Iterator[tuple[str, str]]:
        """Iterate over (identity, location) pairs."""
        ...
