"""Dispatch layer that performs the effects of a classified message."""

from __future__ import annotations

import logging

from storebot.interfaces.messaging_provider import MessagingProvider
from storebot.models.message import BotReply, InboundMessage
from storebot.services.escalation_notifier import EscalationNotifier
from storebot.services.intent_engine import IntentEngine

logger = logging.getLogger(__name__)


class MessageRouter:
    """Classifies inbound messages, escalates when required and replies."""

    def __init__(
        self,
        *,
        intent_engine: IntentEngine,
        messaging_provider: MessagingProvider,
        escalation_notifier: EscalationNotifier,
    ) -> None:
        self.intent_engine = intent_engine
        self.messaging_provider = messaging_provider
        self.escalation_notifier = escalation_notifier
        self._last_response_by_user: dict[str, str] = {}

    async def route_message(self, message: InboundMessage) -> BotReply:
        """Handle one inbound message end to end."""
        logger.info("Message from %s: %s", message.sender_id, message.text)
        reply = await self.intent_engine.classify(sender_id=message.sender_id, message=message.text)

        # Escalations go out before the customer reply; their outcome never changes it.
        for event in reply.escalations:
            await self.escalation_notifier.notify(event)

        delivered = await self._send_reply(user=message.sender_id, text=reply.text)
        if not delivered:
            logger.warning("Reply to %s was not delivered.", message.sender_id)
        self._last_response_by_user[message.sender_id] = reply.text
        return reply

    def get_last_response(self, user: str) -> str | None:
        """Return last reply produced for a user (test/debug helper)."""
        return self._last_response_by_user.get(user)

    async def _send_reply(self, *, user: str, text: str) -> bool:
        try:
            return await self.messaging_provider.send_message(user=user, message=text)
        except Exception:
            logger.exception("Messaging provider failed while replying to %s.", user)
            return False
