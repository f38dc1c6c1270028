"""Presence event domain model."""

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from mumbot.domain.contracts.presence_store import PresenceStoreProtocol

# Location of a user who is connected but not inside a named channel
ROOT_LOCATION = "root"


class EventKind(Enum):
    """Kind of presence change found in a server log line."""

    JOIN = "join"
    LEAVE = "leave"
    MOVE = "move"


@dataclass(frozen=True)
class PresenceEvent:
    """A single presence change parsed from the server log."""

    kind: EventKind
    identity: str
    location: str | None = None  # None for LEAVE

    def apply(self, store: "PresenceStoreProtocol") -> None:
        """Apply this event to a presence store."""
        if self.kind is EventKind.LEAVE:
            store.remove(self.identity)
        else:
            store.set(self.identity, self.location or ROOT_LOCATION)
