"""Bot service entrypoint and provider wiring."""

from __future__ import annotations

from storebot.core.settings import Settings
from storebot.interfaces.catalog_source import CatalogSource
from storebot.interfaces.messaging_provider import MessagingProvider
from storebot.models.message import BotReply, InboundMessage
from storebot.providers.catalog.bling_catalog import BlingCatalogSource
from storebot.providers.catalog.mock_catalog import MockCatalogSource
from storebot.providers.messaging.mock_messaging import MockMessagingProvider
from storebot.providers.messaging.whatsapp_messaging import WhatsAppMessagingProvider
from storebot.services.catalog_cache import CatalogCache
from storebot.services.catalog_client import CatalogClient
from storebot.services.escalation_notifier import EscalationNotifier
from storebot.services.flow_manager import FlowManager
from storebot.services.intent_engine import IntentEngine
from storebot.services.message_router import MessageRouter


class BotService:
    """Thin facade that forwards inbound messages to MessageRouter."""

    def __init__(
        self,
        *,
        catalog_source: CatalogSource,
        messaging_provider: MessagingProvider,
        operator_id: str | None = None,
        cache: CatalogCache | None = None,
    ) -> None:
        self.catalog_client = CatalogClient(source=catalog_source, cache=cache or CatalogCache())
        self.intent_engine = IntentEngine(flow_manager=FlowManager(catalog_client=self.catalog_client))
        self.message_router = MessageRouter(
            intent_engine=self.intent_engine,
            messaging_provider=messaging_provider,
            escalation_notifier=EscalationNotifier(
                messaging_provider=messaging_provider,
                operator_id=operator_id,
            ),
        )

    async def handle_message(self, message: InboundMessage) -> BotReply:
        """Classify, escalate and reply to one inbound message."""
        return await self.message_router.route_message(message)

    async def preview(self, *, user: str, message: str) -> BotReply:
        """Classify without sending the reply or any escalation."""
        return await self.intent_engine.classify(sender_id=user, message=message)


def build_bot_service(settings: Settings) -> BotService:
    """Wire the configured providers into a BotService."""
    catalog_source: CatalogSource
    if settings.catalog_provider == "mock":
        catalog_source = MockCatalogSource()
    else:
        catalog_source = BlingCatalogSource(
            api_key=settings.bling_api_key,
            api_url=settings.bling_api_url,
            page_size=settings.bling_page_size,
            timeout=settings.http_timeout_seconds,
        )

    messaging_provider: MessagingProvider
    if settings.messaging_provider == "mock":
        messaging_provider = MockMessagingProvider()
    else:
        messaging_provider = WhatsAppMessagingProvider(
            token=settings.whatsapp_token,
            phone_number_id=settings.whatsapp_phone_id,
            api_url=settings.whatsapp_api_url,
            timeout=settings.http_timeout_seconds,
        )

    return BotService(
        catalog_source=catalog_source,
        messaging_provider=messaging_provider,
        operator_id=settings.owner_phone,
        cache=CatalogCache(window_seconds=settings.cache_duration_seconds),
    )
