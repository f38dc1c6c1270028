"""IRC chat client built on Twisted's IRC protocol."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from twisted.internet import ssl
from twisted.internet.protocol import ReconnectingClientFactory
from twisted.words.protocols import irc

from mumbot.domain.ports import ChatClient, ChatNotConnectedError

if TYPE_CHECKING:
    from twisted.internet.interfaces import IConnector
    from twisted.python.failure import Failure

    from mumbot.adapters.config import AppConfig

logger = logging.getLogger(__name__)


class MumbotIrcProtocol(irc.IRCClient):
    """IRC connection that joins the report channel once signed on."""

    factory: IrcClientFactory

    def __init__(self, nickname: str, password: str | None, channel: str) -> None:
        self.nickname = nickname
        self.username = nickname
        self.realname = nickname
        self.password = password
        self.channel = channel

    def connectionMade(self) -> None:  # noqa: N802
        logger.info("Connected to IRC server")
        irc.IRCClient.connectionMade(self)

    def connectionLost(self, reason: Failure) -> None:  # noqa: N802
        self.factory.protocol_lost(self)
        irc.IRCClient.connectionLost(self, reason)

    def signedOn(self) -> None:  # noqa: N802
        logger.info("irc_registered")
        self.factory.resetDelay()
        self.factory.protocol_ready(self)
        self.join(self.channel)

    def joined(self, channel: str) -> None:
        logger.info(f"Joined {channel}")

    def lineReceived(self, line: bytes | str) -> None:  # noqa: N802
        logger.debug(f"irc_raw: {line!r}")
        irc.IRCClient.lineReceived(self, line)

    def irc_ERROR(self, prefix: str, params: list[str]) -> None:  # noqa: N802
        logger.error(f"irc_err: {' '.join(params)}")

    def irc_ERR_NICKNAMEINUSE(self, prefix: str, params: list[str]) -> None:  # noqa: N802
        logger.error(f"irc_err: nickname {self.nickname} is already in use")
        irc.IRCClient.irc_ERR_NICKNAMEINUSE(self, prefix, params)

    def irc_ERR_PASSWDMISMATCH(self, prefix: str, params: list[str]) -> None:  # noqa: N802
        logger.error("irc_err: server password rejected")


class IrcClientFactory(ReconnectingClientFactory):
    """Builds IRC connections and reconnects when they drop."""

    def __init__(self, nickname: str, password: str | None, channel: str) -> None:
        self.nickname = nickname
        self.password = password
        self.channel = channel
        self.current: MumbotIrcProtocol | None = None

    def buildProtocol(self, addr: Any) -> MumbotIrcProtocol:  # noqa: N802
        p = MumbotIrcProtocol(self.nickname, self.password, self.channel)
        p.factory = self
        return p

    def protocol_ready(self, protocol: MumbotIrcProtocol) -> None:
        self.current = protocol

    def protocol_lost(self, protocol: MumbotIrcProtocol) -> None:
        if self.current is protocol:
            self.current = None

    def clientConnectionLost(self, connector: IConnector, reason: Failure) -> None:  # noqa: N802
        logger.error(f"irc_err: connection lost: {reason.getErrorMessage()}")
        ReconnectingClientFactory.clientConnectionLost(self, connector, reason)

    def clientConnectionFailed(self, connector: IConnector, reason: Failure) -> None:  # noqa: N802
        logger.error(f"irc_err: connection failed: {reason.getErrorMessage()}")
        ReconnectingClientFactory.clientConnectionFailed(self, connector, reason)


class IrcChatClient(ChatClient):
    """Chat client posting to an IRC channel."""

    def __init__(self, config: AppConfig, reactor: Any) -> None:
        """Initialize the client.

        Args:
            config: Application configuration with the IRC settings.
            reactor: Twisted reactor to connect with.
        """
        self._server = config.irc_server
        self._port = config.irc_port
        self._secure = config.irc_secure
        self._reactor = reactor
        self.factory = IrcClientFactory(config.irc_nick, config.irc_password, config.irc_channel)
        self._connector: IConnector | None = None

    @property
    def is_ready(self) -> bool:
        """Whether the client is signed on and can send."""
        return self.factory.current is not None

    def connect(self) -> None:
        """Start connecting to the IRC server."""
        logger.info(f"makeIrcClient: {self._server}:{self._port} (tls={self._secure})")
        if self._secure:
            options = ssl.optionsForClientTLS(self._server)
            self._connector = self._reactor.connectSSL(
                self._server, self._port, self.factory, options
            )
        else:
            self._connector = self._reactor.connectTCP(self._server, self._port, self.factory)

    def send(self, channel: str, text: str) -> None:
        """Send a message to a channel."""
        protocol = self.factory.current
        if protocol is None:
            raise ChatNotConnectedError(f"Not signed on to {self._server}, cannot send to {channel}")
        protocol.msg(channel, text)

    def disconnect(self) -> None:
        """Quit and stop reconnecting."""
        self.factory.stopTrying()
        protocol = self.factory.current
        if protocol is not None:
            protocol.quit()
        elif self._connector is not None:
            self._connector.disconnect()
