"""Transient message and effect types exchanged between services."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class InboundMessage:
    """Customer text extracted from a webhook event."""

    sender_id: str
    text: str
    message_id: str | None = None


@dataclass(frozen=True, slots=True)
class EscalationEvent:
    """Alert for the human operator, raised alongside the automatic reply."""

    subject: str
    sender_id: str
    original_text: str


@dataclass(frozen=True, slots=True)
class BotReply:
    """Reply text plus the side effects the dispatcher must perform."""

    intent: str
    text: str
    escalations: tuple[EscalationEvent, ...] = field(default_factory=tuple)
