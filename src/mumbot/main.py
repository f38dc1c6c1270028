"""Main entry point for mumbot."""

from __future__ import annotations

import asyncio
import logging
import signal
import sys
from collections.abc import Coroutine, Sequence
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError
from twisted.internet import asyncioreactor
from twisted.internet.defer import Deferred
from twisted.logger import STDLibLogObserver, globalLogBeginner

from mumbot.adapters.log_source import SubprocessLogSource
from mumbot.application.services import (
    LogMonitor,
    Notifier,
    PresenceSession,
    PresenceStore,
    ReportScheduler,
)
from mumbot.cli import load_config
from mumbot.domain.ports import LogSourceError

if TYPE_CHECKING:
    from mumbot.adapters.config import AppConfig
    from mumbot.domain.ports import ChatClient, LogSource

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
    stream=sys.stderr,
)

logger = logging.getLogger(__name__)


class MumbotApp:
    """Wires the log monitor and the chat client together for one process."""

    def __init__(
        self,
        config: AppConfig,
        chat_client: ChatClient,
        log_source: LogSource,
        loop: asyncio.AbstractEventLoop | None = None,
    ) -> None:
        """Build the presence session and its collaborators.

        Args:
            config: Application configuration.
            chat_client: Client the reports are posted through.
            log_source: Source of the mumble server log.
            loop: Loop tasks are spawned on. Defaults to the running loop,
                which only exists once the loop has started.
        """
        self.config = config
        self.chat_client = chat_client
        store = PresenceStore()
        notifier = Notifier(store, chat_client, config.irc_channel)
        scheduler = ReportScheduler(notifier, config.min_delay_seconds)
        self.session = PresenceSession(store, notifier, scheduler)
        self.monitor = LogMonitor(log_source, self.session)
        self.exit_code = 0
        self._loop = loop
        self._tasks: set[asyncio.Task] = set()

    async def start(self) -> None:
        """Connect to chat and start monitoring the log.

        Raises:
            LogSourceError: If the existing log cannot be read.
        """
        self.chat_client.connect()
        await self.monitor.start()

    async def stop(self) -> None:
        """Stop monitoring and leave chat."""
        await self.monitor.stop()
        self.chat_client.disconnect()

    def handle_sighup(self) -> None:
        """Restart following the log."""
        logger.info("SIGHUP")
        self.spawn(self._restart_follow())

    async def _restart_follow(self) -> None:
        try:
            await self.monitor.restart_follow()
        except LogSourceError as e:
            logger.error(f"Cannot follow mumble log: {e}")

    def spawn(self, coro: Coroutine[Any, Any, None]) -> asyncio.Task:
        """Run a coroutine on the loop, keeping a reference until it is done."""
        loop = self._loop or asyncio.get_running_loop()
        task = loop.create_task(coro)
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task


async def _start_or_stop_reactor(app: MumbotApp, reactor: Any) -> None:
    try:
        await app.start()
    except LogSourceError as e:
        logger.error(f"Cannot read mumble log: {e}")
        app.exit_code = 1
        reactor.stop()


def main(argv: Sequence[str] | None = None) -> None:
    """Application entry point."""
    try:
        config = load_config(argv)
    except ValidationError as e:
        logger.error(f"Invalid configuration: {e}")
        sys.exit(1)

    logging.getLogger().setLevel(config.log_level_number)
    logger.info(f"construct: {config.describe()}")
    globalLogBeginner.beginLoggingTo([STDLibLogObserver()], redirectStandardIO=False)

    # The reactor has to be installed before anything imports twisted.internet.reactor
    loop = asyncio.new_event_loop()
    asyncio.set_event_loop(loop)
    asyncioreactor.install(loop)
    from twisted.internet import reactor

    from mumbot.adapters.irc import IrcChatClient

    app = MumbotApp(
        config, IrcChatClient(config, reactor), SubprocessLogSource(config.log_file), loop=loop
    )

    reactor.callWhenRunning(lambda: app.spawn(_start_or_stop_reactor(app, reactor)))
    reactor.callWhenRunning(loop.add_signal_handler, signal.SIGHUP, app.handle_sighup)
    reactor.addSystemEventTrigger(
        "before", "shutdown", lambda: Deferred.fromFuture(app.spawn(app.stop()))
    )
    reactor.run()
    sys.exit(app.exit_code)


if __name__ == "__main__":
    main()
