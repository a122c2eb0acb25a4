"""Domain models package."""

from storebot.models.message import BotReply, EscalationEvent, InboundMessage
from storebot.models.product import Product

__all__ = [
    "BotReply",
    "EscalationEvent",
    "InboundMessage",
    "Product",
]
