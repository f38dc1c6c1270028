"""Adapters layer - external system integrations.

The IRC adapter is imported from ``mumbot.adapters.irc`` directly: importing
Twisted's IRC protocol installs the default reactor, so it must only happen
after ``main`` has installed the asyncio reactor.
"""

from mumbot.adapters.config import AppConfig
from mumbot.adapters.log_source import SubprocessLogSource

__all__ = [
    "AppConfig",
    "SubprocessLogSource",
]
