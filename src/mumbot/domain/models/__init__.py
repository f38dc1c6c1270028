"""Domain models for mumbot."""

from mumbot.domain.models.presence_event import ROOT_LOCATION, EventKind, PresenceEvent
from mumbot.domain.models.report_state import Armed, Idle, ReportState

__all__ = [
    "ROOT_LOCATION",
    "Armed",
    "EventKind",
    "Idle",
    "PresenceEvent",
    "ReportState",
]
