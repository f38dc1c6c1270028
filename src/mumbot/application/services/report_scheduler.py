"""Debounced scheduling of join reports."""

from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import Callable, Mapping
from typing import TYPE_CHECKING

from mumbot.domain.models import Armed, Idle, ReportState

if TYPE_CHECKING:
    from mumbot.application.services.notifier import Notifier
    from mumbot.domain.contracts import CallLater, Clock, TimerHandle

logger = logging.getLogger(__name__)


def _loop_call_later(delay: float, callback: Callable[[], None]) -> TimerHandle:
    return asyncio.get_running_loop().call_later(delay, callback)


class ReportScheduler:
    """Decides whether growth in presence is reported now, later or not at all.

    Reports are at least ``min_delay_seconds`` apart. The first growth after
    that interval is reported at once; growth inside the interval arms a
    single timer for the end of the interval, and any further growth before
    it fires is folded into the same report, measured against the baseline
    captured when the timer was armed.
    """

    def __init__(
        self,
        notifier: Notifier,
        min_delay_seconds: float,
        clock: Clock = time.time,
        call_later: CallLater = _loop_call_later,
    ) -> None:
        """Initialize the scheduler.

        Args:
            notifier: Sends the reports and records when the last one went out.
            min_delay_seconds: Minimum time between two reports.
            clock: Source of wall-clock time in seconds.
            call_later: Schedules the delayed report.
        """
        self._notifier = notifier
        self._min_delay_seconds = min_delay_seconds
        self._clock = clock
        self._call_later = call_later
        self._state: ReportState = Idle()

    @property
    def state(self) -> ReportState:
        """Current scheduler state."""
        return self._state

    def on_growth(self, baseline: Mapping[str, str]) -> None:
        """Handle a line that increased the number of present users.

        Args:
            baseline: Presence snapshot from before the line was applied.
        """
        now = self._clock()
        deadline = self._notifier.last_report_at + self._min_delay_seconds

        if now > deadline:
            logger.info("Reporting now")
            self.cancel()
            self._notifier.report(baseline)
            return

        match self._state:
            case Idle():
                delay = deadline - now
                logger.info(f"Reporting in {delay:.0f}s")
                handle = self._call_later(delay, self._fire)
                self._state = Armed(fire_at=deadline, baseline=baseline, handle=handle)
            case Armed():
                logger.info("Report already scheduled")

    def cancel(self) -> None:
        """Drop a pending delayed report, if any."""
        if isinstance(self._state, Armed):
            self._state.handle.cancel()
            self._state = Idle()

    def _fire(self) -> None:
        state = self._state
        if not isinstance(state, Armed):
            return
        self._state = Idle()
        self._notifier.report(state.baseline)
