"""In-memory presence state."""

from collections.abc import Iterator, Mapping
from types import MappingProxyType


class PresenceStore:
    """Maps each connected user to their current location."""

    def __init__(self) -> None:
        """Initialize an empty store."""
        self._users: dict[str, str] = {}

    def set(self, identity: str, location: str) -> None:
        """Record that identity is present at location."""
        self._users[identity] = location

    def remove(self, identity: str) -> None:
        """Forget identity. Unknown identities are ignored."""
        self._users.pop(identity, None)

    def get(self, identity: str) -> str | None:
        """Return the location of identity, or None if not present."""
        return self._users.get(identity)

    def size(self) -> int:
        """Return the number of present users."""
        return len(self._users)

    def snapshot(self) -> Mapping[str, str]:
        """Return an independent, read-only copy of the current state."""
        return MappingProxyType(dict(self._users))

    def items(self) -> Iterator[tuple[str, str]]:
        """Iterate over (identity, location) pairs."""
        return iter(list(self._users.items()))

    def __len__(self) -> int:
        return len(self._users)

    def __contains__(self, identity: object) -> bool:
        return identity in self._users

    def __iter__(self) -> Iterator[tuple[str, str]]:
        return self.items()

    def __repr__(self) -> str:
        return f"PresenceStore({self._users!r})"
