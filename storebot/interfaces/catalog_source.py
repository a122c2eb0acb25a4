"""Interface contract for catalog sources."""

from abc import ABC, abstractmethod

from storebot.models.product import Product


class CatalogUnavailableError(Exception):
    """Raised when the upstream catalog cannot deliver a usable product list."""


class CatalogSource(ABC):
    """Defines bulk product retrieval from a commerce backend."""

    @abstractmethod
    async def fetch_products(self) -> list[Product]:
        """Return the full product list or raise CatalogUnavailableError."""
        raise NotImplementedError
