"""Catalog access with cache-first reads and stale fallback."""

from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import Callable

from storebot.interfaces.catalog_source import CatalogSource, CatalogUnavailableError
from storebot.models.product import Product
from storebot.services.catalog_cache import CatalogCache

logger = logging.getLogger(__name__)


class CatalogClient:
    """Serves products from the cache, refreshing from upstream when stale.

    Upstream failures never propagate: the last cached snapshot is returned
    instead, and an empty tuple means nothing was ever fetched successfully.
    """

    def __init__(
        self,
        source: CatalogSource,
        cache: CatalogCache,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.source = source
        self.cache = cache
        self.clock = clock
        self._refresh_lock = asyncio.Lock()

    async def fetch_products(self) -> tuple[Product, ...]:
        if self.cache.is_fresh(self.clock()):
            logger.debug("Serving products from cache.")
            return self.cache.get()

        async with self._refresh_lock:
            # Another request may have refreshed while we waited.
            if self.cache.is_fresh(self.clock()):
                return self.cache.get()
            return await self._refresh()

    async def _refresh(self) -> tuple[Product, ...]:
        logger.info("Fetching products from upstream catalog.")
        try:
            products = await self.source.fetch_products()
        except CatalogUnavailableError as exc:
            logger.warning("Catalog unavailable, using cached snapshot: %s", exc)
            return self.cache.get()
        except Exception:
            logger.exception("Unexpected catalog failure, using cached snapshot.")
            return self.cache.get()

        if not products:
            logger.warning("Catalog returned no products, using cached snapshot.")
            return self.cache.get()

        self.cache.set(products, self.clock())
        return self.cache.get()
