"""Chat client port."""

from abc import ABC, abstractmethod


class ChatError(Exception):
    """Raised when a chat message cannot be delivered."""


class ChatNotConnectedError(ChatError):
    """Raised when sending before the client has signed on."""


class ChatClient(ABC):
    """Port for the chat network the notifications are posted to."""

    @abstractmethod
    def connect(self) -> None:
        """Start connecting, authenticating and joining the channel."""
        ...

    @abstractmethod
    def send(self, channel: str, text: str) -> None:
        """Send a message to a channel.

        Raises:
            ChatError: If the message cannot be handed to the network.
        """
        ...

    @abstractmethod
    def disconnect(self) -> None:
        """Close the connection and stop reconnecting."""
        ...
