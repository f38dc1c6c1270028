"""Protocols for components injected into the presence core."""

from mumbot.domain.contracts.presence_store import PresenceStoreProtocol
from mumbot.domain.contracts.timing import CallLater, Clock, TimerHandle

__all__ = [
    "CallLater",
    "Clock",
    "PresenceStoreProtocol",
    "TimerHandle",
]
