"""Application services (use cases) for presence tracking and reporting."""

from mumbot.application.services.event_parser import parse_line
from mumbot.application.services.line_splitter import LineSplitter
from mumbot.application.services.log_monitor import LogMonitor
from mumbot.application.services.notifier import Notifier, format_join_message
from mumbot.application.services.presence_session import PresenceSession
from mumbot.application.services.presence_store import PresenceStore
from mumbot.application.services.report_scheduler import ReportScheduler

__all__ = [
    "LineSplitter",
    "LogMonitor",
    "Notifier",
    "PresenceSession",
    "PresenceStore",
    "ReportScheduler",
    "format_join_message",
    "parse_line",
]
