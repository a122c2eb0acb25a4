"""Rule-based intent detection with a fixed priority order."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from storebot.models.message import BotReply, EscalationEvent
from storebot.services.flow_manager import FlowManager
from storebot.services.text_normalizer import normalize

logger = logging.getLogger(__name__)

FALLBACK_INTENT = "fallback"


@dataclass(frozen=True, slots=True)
class IntentRule:
    """Keywords for one intent and the operator alert it raises, if any."""

    intent: str
    keywords: tuple[str, ...]
    escalation_subject: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "keywords", tuple(normalize(keyword) for keyword in self.keywords))

    def matches(self, normalized_text: str) -> bool:
        """Substring containment, not whole-word matching."""
        return any(keyword in normalized_text for keyword in self.keywords)


# First match wins. A message mentioning both a defect and delivery is a defect.
INTENT_RULES: tuple[IntentRule, ...] = (
    IntentRule(
        intent="defect",
        keywords=("defeito", "garantia", "problema", "não funciona"),
        escalation_subject="⚠️ CLIENTE COM DEFEITO/GARANTIA",
    ),
    IntentRule(
        intent="stock",
        keywords=("tem em estoque", "disponível", "em estoque", "vocês tem"),
    ),
    IntentRule(
        intent="price",
        keywords=("preço", "quanto custa", "valor", "custa"),
    ),
    IntentRule(
        intent="delivery",
        keywords=("entrega", "frete", "uber", "como recebo"),
        escalation_subject="🚗 CLIENTE PERGUNTANDO SOBRE ENTREGA",
    ),
    IntentRule(
        intent="greeting",
        keywords=("oi", "olá", "e aí", "tudo bem"),
    ),
)


class IntentEngine:
    """Classifies customer text and builds the reply with its side effects."""

    def __init__(self, flow_manager: FlowManager, rules: Sequence[IntentRule] = INTENT_RULES) -> None:
        self.flow_manager = flow_manager
        self.rules = tuple(rules)

    def match(self, message: str) -> IntentRule | None:
        """Return the highest-priority rule whose keywords appear in the message."""
        normalized_message = normalize(message)
        for rule in self.rules:
            if rule.matches(normalized_message):
                return rule
        return None

    def detect_intent(self, message: str) -> str:
        rule = self.match(message)
        return rule.intent if rule is not None else FALLBACK_INTENT

    async def classify(self, sender_id: str, message: str) -> BotReply:
        """Return reply text and escalations; performs no outbound sends."""
        rule = self.match(message)
        intent = rule.intent if rule is not None else FALLBACK_INTENT
        logger.info("Message from %s classified as %s.", sender_id, intent)

        text = await self.flow_manager.handle(intent)

        escalations: tuple[EscalationEvent, ...] = ()
        if rule is not None and rule.escalation_subject:
            escalations = (
                EscalationEvent(
                    subject=rule.escalation_subject,
                    sender_id=sender_id,
                    original_text=message,
                ),
            )
        return BotReply(intent=intent, text=text, escalations=escalations)
