"""Mock catalog source implementation."""

from decimal import Decimal

from storebot.interfaces.catalog_source import CatalogSource, CatalogUnavailableError
from storebot.models.product import Product


class MockCatalogSource(CatalogSource):
    """In-memory catalog used for local runs and tests."""

    def __init__(self, products: list[Product] | None = None, *, fail: bool = False) -> None:
        if products is None:
            products = [
                Product(name="Fone Bluetooth", price=Decimal("149.90"), stock_quantity=12),
                Product(name="Carregador USB-C 20W", price=Decimal("89.00"), stock_quantity=0),
                Product(name="Smartwatch Fit", price=Decimal("399.99"), stock_quantity=3),
            ]
        self.products = products
        self.fail = fail
        self.calls = 0

    async def fetch_products(self) -> list[Product]:
        self.calls += 1
        if self.fail:
            raise CatalogUnavailableError("Mock catalog configured to fail")
        return list(self.products)
