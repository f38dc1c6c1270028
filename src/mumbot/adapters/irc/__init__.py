"""IRC adapters."""

from mumbot.adapters.irc.irc_chat_client import IrcChatClient, IrcClientFactory, MumbotIrcProtocol

__all__ = ["IrcChatClient", "IrcClientFactory", "MumbotIrcProtocol"]
