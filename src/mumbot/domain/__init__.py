"""Domain layer - presence models and collaborator interfaces."""

from mumbot.domain.models import Armed, EventKind, Idle, PresenceEvent, ReportState
from mumbot.domain.ports import ChatClient, LogSource

__all__ = [
    "Armed",
    "ChatClient",
    "EventKind",
    "Idle",
    "LogSource",
    "PresenceEvent",
    "ReportState",
]
