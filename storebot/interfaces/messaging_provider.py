"""Interface contract for messaging providers."""

from abc import ABC, abstractmethod


class MessagingProvider(ABC):
    """Defines outbound message delivery behavior."""

    @abstractmethod
    async def send_message(self, user: str, message: str) -> bool:
        """Send a message to a target user and report whether it was delivered."""
        raise NotImplementedError
