"""WhatsApp Cloud API messaging provider."""

from __future__ import annotations

import logging

import httpx

from storebot.interfaces.messaging_provider import MessagingProvider

logger = logging.getLogger(__name__)


class WhatsAppMessagingProvider(MessagingProvider):
    """Sends plain text messages through the WhatsApp Cloud API."""

    def __init__(
        self,
        *,
        token: str | None,
        phone_number_id: str | None,
        api_url: str = "https://graph.facebook.com/v18.0",
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.token = token
        self.phone_number_id = phone_number_id
        self.api_url = api_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport

    @property
    def messages_url(self) -> str:
        return f"{self.api_url}/{self.phone_number_id}/messages"

    async def send_message(self, user: str, message: str) -> bool:
        if not self.token or not self.phone_number_id:
            logger.error("WhatsApp credentials not configured; message to %s dropped.", user)
            return False

        payload = {
            "messaging_product": "whatsapp",
            "to": user,
            "type": "text",
            "text": {"body": message},
        }
        headers = {
            "Authorization": f"Bearer {self.token}",
            "Content-Type": "application/json",
        }
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                response = await client.post(self.messages_url, json=payload, headers=headers)
                response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            logger.error(
                "WhatsApp rejected message to %s: HTTP %s %s",
                user,
                exc.response.status_code,
                exc.response.text,
            )
            return False
        except httpx.HTTPError as exc:
            logger.error("Failed to send WhatsApp message to %s: %s", user, exc)
            return False

        logger.info("Message sent to %s.", user)
        return True
