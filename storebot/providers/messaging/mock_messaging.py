"""Mock messaging provider implementation."""

import logging

from storebot.interfaces.messaging_provider import MessagingProvider

logger = logging.getLogger(__name__)


class MockMessagingProvider(MessagingProvider):
    """Log-based sender for local testing."""

    def __init__(self) -> None:
        self.sent_messages: list[dict[str, str]] = []

    async def send_message(self, user: str, message: str) -> bool:
        self.sent_messages.append({"user": user, "message": message})
        logger.info("[MockMessaging] -> user=%s | message=%s", user, message)
        return True
