"""Long-lived controller tying log parsing to presence reporting."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from mumbot.application.services.event_parser import parse_line
from mumbot.application.services.line_splitter import LineSplitter

if TYPE_CHECKING:
    from mumbot.application.services.notifier import Notifier
    from mumbot.application.services.presence_store import PresenceStore
    from mumbot.application.services.report_scheduler import ReportScheduler

logger = logging.getLogger(__name__)


class PresenceSession:
    """Owns the presence state of one server log and its reporting.

    The session starts in the priming phase: lines replayed from the existing
    log update presence but never trigger a report. Call ``finish_priming``
    once the existing content has been read.
    """

    def __init__(
        self,
        store: PresenceStore,
        notifier: Notifier,
        scheduler: ReportScheduler,
    ) -> None:
        """Initialize the session.

        Args:
            store: Presence state updated from the log.
            notifier: Sends join reports.
            scheduler: Debounces join reports.
        """
        self._store = store
        self._notifier = notifier
        self._scheduler = scheduler
        self._splitter = LineSplitter()
        self._priming = True

    @property
    def store(self) -> PresenceStore:
        """Presence state updated from the log."""
        return self._store

    @property
    def notifier(self) -> Notifier:
        """Notifier sending join reports."""
        return self._notifier

    @property
    def scheduler(self) -> ReportScheduler:
        """Scheduler debouncing join reports."""
        return self._scheduler

    @property
    def is_priming(self) -> bool:
        """Whether the existing log is still being replayed."""
        return self._priming

    def finish_priming(self) -> None:
        """Leave the priming phase; later growth is reported."""
        self._priming = False
        logger.info(f"Initial log read complete, {self._store.size()} user(s) online")

    def feed(self, chunk: str | bytes) -> None:
        """Process a raw chunk of log output."""
        for line in self._splitter.feed(chunk):
            self.handle_line(line)

    def handle_line(self, line: str) -> None:
        """Apply one complete log line and decide on reporting."""
        event = parse_line(line)
        if event is None:
            return

        baseline = self._store.snapshot()
        event.apply(self._store)

        if self._priming:
            return

        logger.info(f"mumbleState: {dict(self._store.items())}")
        if self._store.size() > len(baseline):
            self._scheduler.on_growth(baseline)
