"""FastAPI dependency providers."""

from functools import lru_cache

from storebot.core.settings import settings
from storebot.services.bot_service import BotService, build_bot_service


@lru_cache
def get_bot_service() -> BotService:
    """Process-wide BotService, so the catalog cache is shared across requests."""
    return build_bot_service(settings)


def get_verify_token() -> str:
    return settings.verify_token
