"""Formatting and dispatch of join notifications."""

import logging
import time
from collections.abc import Mapping

from mumbot.domain.contracts import Clock, PresenceStoreProtocol
from mumbot.domain.ports import ChatClient, ChatError

logger = logging.getLogger(__name__)


def format_join_message(new_users: list[str], online_count: int) -> str:
    """Build the chat line announcing new users.

    The online count is left out when everybody online just joined.
    """
    message = f"{', '.join(new_users)} joined mumble"
    if len(new_users) != online_count:
        message += f" ({online_count} users online)"
    return message


class Notifier:
    """Reports users who appeared since a baseline snapshot."""

    def __init__(
        self,
        store: PresenceStoreProtocol,
        chat_client: ChatClient,
        channel: str,
        clock: Clock = time.time,
    ) -> None:
        """Initialize the notifier.

        Args:
            store: Live presence state.
            chat_client: Client the notification is sent through.
            channel: Channel to post to.
            clock: Source of wall-clock time in seconds.
        """
        self._store = store
        self._chat_client = chat_client
        self._channel = channel
        self._clock = clock
        self.last_report_at: float = 0.0
        self.last_new_users: list[str] = []

    def new_users_since(self, baseline: Mapping[str, str]) -> list[str]:
        """Return users present now but absent from baseline, sorted."""
        return sorted(identity for identity, _ in self._store.items() if identity not in baseline)

    def report(self, baseline: Mapping[str, str]) -> bool:
        """Send a notification for users who joined since baseline.

        Args:
            baseline: Presence snapshot the report is relative to.

        Returns:
            True if a message was handed to the chat client.
        """
        new_users = self.new_users_since(baseline)
        if not new_users or new_users == self.last_new_users:
            logger.debug(f"Nothing new to report: {new_users}")
            return False

        self.last_new_users = new_users
        self.last_report_at = self._clock()

        message = format_join_message(new_users, self._store.size())
        logger.info(f"irc_out: {message}")
        try:
            self._chat_client.send(self._channel, message)
        except ChatError as e:
            logger.error(f"Failed to send notification to {self._channel}: {e}")
            return False
        return True
