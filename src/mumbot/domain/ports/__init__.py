"""Ports (interfaces) for the ports-and-adapters architecture."""

from mumbot.domain.ports.chat_client import ChatClient, ChatError, ChatNotConnectedError
from mumbot.domain.ports.log_source import LogSource, LogSourceError

__all__ = [
    "ChatClient",
    "ChatError",
    "ChatNotConnectedError",
    "LogSource",
    "LogSourceError",
]
