"""Feeds a server log into a presence session."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from mumbot.application.services.presence_session import PresenceSession
    from mumbot.domain.ports import LogSource

logger = logging.getLogger(__name__)


class LogMonitor:
    """Reads the existing log to prime a session, then follows it live."""

    def __init__(self, log_source: LogSource, session: PresenceSession) -> None:
        """Initialize the monitor.

        Args:
            log_source: Source of log content.
            session: Session receiving the content.
        """
        self._log_source = log_source
        self._session = session
        self._following = False

    @property
    def is_following(self) -> bool:
        """Whether a follow stream is currently running."""
        return self._following

    async def start(self) -> None:
        """Replay the existing log, then start following appended lines."""
        logger.info("Reading existing log")
        await self._log_source.read_all(self._session.feed)
        self._session.finish_priming()
        await self._follow()

    async def restart_follow(self) -> None:
        """Replace the follow stream with a fresh one from the current end of the log."""
        if self._session.is_priming:
            logger.info("Ignoring follow restart while the initial read is running")
            return
        await self._follow()

    async def stop(self) -> None:
        """Stop following and drop any pending report."""
        await self._log_source.cancel()
        self._following = False
        self._session.scheduler.cancel()

    async def _follow(self) -> None:
        await self._log_source.cancel()
        logger.info("tailLog: following appended log lines")
        await self._log_source.follow(self._session.feed, self._on_log_closed)
        self._following = True

    def _on_log_closed(self) -> None:
        self._following = False
        logger.error("log_close: log stream ended")
