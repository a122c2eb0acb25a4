"""Reply handlers for each supported intent."""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Sequence
from decimal import ROUND_HALF_EVEN, Decimal

from storebot.models.product import Product
from storebot.services.catalog_client import CatalogClient

MAX_LISTED_PRODUCTS = 5
CENTS = Decimal("0.01")

DEFECT_REPLY = (
    "Entendi que você tem um problema com seu produto. 😟\n\n"
    "Vou passar você para nosso time de atendimento especializado em garantia.\n\n"
    "Um momento..."
)
STOCK_UNAVAILABLE_REPLY = (
    "Desculpa, não consegui acessar nosso estoque agora. Tenta novamente em alguns segundos! 😊"
)
OUT_OF_STOCK_REPLY = (
    "No momento, não temos produtos em estoque. Mas estamos recebendo novidades em breve! 🚀"
)
PRICE_UNAVAILABLE_REPLY = "Desculpa, não consegui acessar nossos preços agora. Tenta novamente! 😊"
DELIVERY_REPLY = (
    "Ótimo! 🚚\n\n"
    "Para entregas, oferecemos:\n\n"
    "✅ *Frete Normal* - 5-7 dias úteis\n"
    "✅ *Uber Eats* - Entrega rápida (quando disponível)\n\n"
    "Vou passar você para nosso time de vendas confirmar a melhor opção para você! Um momento... 😊"
)
GREETING_REPLY = (
    "Oi! 👋 Bem-vindo à nossa loja de eletrônicos! 🎉\n\n"
    "Como posso ajudar você hoje?\n\n"
    "• Quer saber sobre *produtos em estoque*?\n"
    "• Quer conhecer nossos *preços*?\n"
    "• Tem dúvidas sobre *entrega*?\n\n"
    "É só chamar! 😊"
)
FALLBACK_REPLY = (
    "Desculpa, não entendi muito bem sua pergunta. 🤔\n\n"
    "Posso ajudar com:\n\n"
    "• Produtos em estoque\n"
    "• Preços\n"
    "• Informações de entrega\n"
    "• Dúvidas sobre produtos\n\n"
    "Tenta reformular sua pergunta! 😊"
)


def format_price(price: Decimal) -> str:
    """Render a price with exactly two decimals, rounding half to even."""
    return str(price.quantize(CENTS, rounding=ROUND_HALF_EVEN))


class FlowManager:
    """Produces the reply text for a classified intent."""

    def __init__(self, catalog_client: CatalogClient) -> None:
        self.catalog_client = catalog_client
        self._handlers: dict[str, Callable[[], Awaitable[str]]] = {
            "defect": self.handle_defect,
            "stock": self.handle_stock,
            "price": self.handle_price,
            "delivery": self.handle_delivery,
            "greeting": self.handle_greeting,
            "fallback": self.handle_fallback,
        }

    async def handle(self, intent: str) -> str:
        """Run the handler for one intent; unknown labels get the fallback menu."""
        handler = self._handlers.get(intent, self.handle_fallback)
        return await handler()

    async def handle_defect(self) -> str:
        return DEFECT_REPLY

    async def handle_stock(self) -> str:
        products = await self.catalog_client.fetch_products()
        if not products:
            return STOCK_UNAVAILABLE_REPLY
        return self._format_stock_list(products)

    async def handle_price(self) -> str:
        products = await self.catalog_client.fetch_products()
        if not products:
            return PRICE_UNAVAILABLE_REPLY
        return self._format_price_list(products)

    async def handle_delivery(self) -> str:
        return DELIVERY_REPLY

    async def handle_greeting(self) -> str:
        return GREETING_REPLY

    async def handle_fallback(self) -> str:
        return FALLBACK_REPLY

    def _format_stock_list(self, products: Sequence[Product]) -> str:
        # Only the first products are considered; the stock filter runs after the cut.
        in_stock = [p for p in products[:MAX_LISTED_PRODUCTS] if p.stock_quantity > 0]
        if not in_stock:
            return OUT_OF_STOCK_REPLY

        lines = ["📦 *Produtos em Estoque:*", ""]
        for product in in_stock:
            lines.append(f"✅ *{product.name}*")
            lines.append(f"   Preço: R$ {format_price(product.price)}")
            lines.append(f"   Estoque: {product.stock_quantity} unidades")
            lines.append("")
        lines.append("Quer saber mais sobre algum produto? 😊")
        return "\n".join(lines)

    def _format_price_list(self, products: Sequence[Product]) -> str:
        lines = ["💰 *Nossos Preços:*", ""]
        for product in products[:MAX_LISTED_PRODUCTS]:
            lines.append(f"• *{product.name}*: R$ {format_price(product.price)}")
        lines.append("")
        lines.append("Quer mais informações? 😊")
        return "\n".join(lines)
