"""Side-channel alerts to the human operator."""

from __future__ import annotations

import logging

from storebot.interfaces.messaging_provider import MessagingProvider
from storebot.models.message import EscalationEvent

logger = logging.getLogger(__name__)


class EscalationNotifier:
    """Forwards escalation events to a single operator contact."""

    def __init__(self, messaging_provider: MessagingProvider, operator_id: str | None) -> None:
        self.messaging_provider = messaging_provider
        self.operator_id = operator_id.strip() if operator_id and operator_id.strip() else None

    def format_alert(self, event: EscalationEvent) -> str:
        return (
            f"🔔 *{event.subject}*\n\n"
            f"Telefone: {event.sender_id}\n"
            f"Mensagem: {event.original_text}"
        )

    async def notify(self, event: EscalationEvent) -> bool:
        """Send the alert; never raises, returns False when nothing was delivered."""
        if self.operator_id is None:
            logger.debug("No operator configured; skipping escalation %s.", event.subject)
            return False

        try:
            delivered = await self.messaging_provider.send_message(
                user=self.operator_id,
                message=self.format_alert(event),
            )
        except Exception:
            logger.exception("Escalation for %s could not be sent.", event.sender_id)
            return False

        if delivered:
            logger.info("Escalated %s from %s to operator.", event.subject, event.sender_id)
        else:
            logger.warning("Escalation for %s was not delivered.", event.sender_id)
        return delivered
