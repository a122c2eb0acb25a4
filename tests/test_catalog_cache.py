"""Unit tests for the catalog cache and the cache-backed catalog client."""

from __future__ import annotations

import threading
import unittest

from storebot.interfaces.catalog_source import CatalogUnavailableError
from storebot.services.catalog_cache import CatalogCache
from storebot.services.catalog_client import CatalogClient
from tests.stubs import ManualClock, StubCatalogSource, product


class CatalogCacheTestCase(unittest.TestCase):
    def test_empty_cache_is_never_fresh(self) -> None:
        cache = CatalogCache(window_seconds=1.0)
        self.assertFalse(cache.is_fresh(0.0))
        self.assertEqual(cache.get(), ())

    def test_freshness_window_boundaries(self) -> None:
        cache = CatalogCache(window_seconds=1.0)
        cache.set([product("A")], now=0.0)

        self.assertTrue(cache.is_fresh(0.999))
        self.assertFalse(cache.is_fresh(1.0))
        self.assertFalse(cache.is_fresh(1.001))

    def test_set_replaces_products_and_timestamp_together(self) -> None:
        cache = CatalogCache(window_seconds=10.0)
        cache.set([product("A"), product("B")], now=5.0)
        cache.set([product("C")], now=7.0)

        products, fetched_at = cache.snapshot()
        self.assertEqual([p.name for p in products], ["C"])
        self.assertEqual(fetched_at, 7.0)

    def test_timestamp_never_moves_backwards(self) -> None:
        cache = CatalogCache(window_seconds=10.0)
        cache.set([product("A")], now=5.0)
        cache.set([product("B")], now=3.0)

        self.assertEqual(cache.snapshot()[1], 5.0)

    def test_rejects_empty_product_list(self) -> None:
        cache = CatalogCache()
        with self.assertRaises(ValueError):
            cache.set([], now=1.0)

    def test_rejects_non_positive_window(self) -> None:
        with self.assertRaises(ValueError):
            CatalogCache(window_seconds=0)

    def test_concurrent_readers_never_see_mismatched_pairs(self) -> None:
        cache = CatalogCache(window_seconds=100.0)
        cache.set([product("gen-0")], now=0.0)
        mismatches: list[tuple[str, float]] = []
        stop = threading.Event()

        def writer() -> None:
            for generation in range(1, 2000):
                cache.set([product(f"gen-{generation}")], now=float(generation))
            stop.set()

        def reader() -> None:
            while not stop.is_set():
                products, fetched_at = cache.snapshot()
                if products[0].name != f"gen-{int(fetched_at)}":
                    mismatches.append((products[0].name, fetched_at))

        threads = [threading.Thread(target=reader) for _ in range(4)]
        threads.append(threading.Thread(target=writer))
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        self.assertEqual(mismatches, [])


class CatalogClientTestCase(unittest.IsolatedAsyncioTestCase):
    def _build_client(self, source: StubCatalogSource, window: float = 1.0) -> tuple[CatalogClient, ManualClock]:
        clock = ManualClock()
        client = CatalogClient(source=source, cache=CatalogCache(window_seconds=window), clock=clock)
        return client, clock

    async def test_fresh_cache_skips_upstream_call(self) -> None:
        source = StubCatalogSource([product("A")])
        client, clock = self._build_client(source)

        await client.fetch_products()
        clock.now = 0.999
        products = await client.fetch_products()

        self.assertEqual(source.calls, 1)
        self.assertEqual([p.name for p in products], ["A"])

    async def test_stale_cache_triggers_refetch(self) -> None:
        source = StubCatalogSource([product("A")])
        client, clock = self._build_client(source)

        await client.fetch_products()
        source.products = [product("B")]
        clock.now = 1.001
        products = await client.fetch_products()

        self.assertEqual(source.calls, 2)
        self.assertEqual([p.name for p in products], ["B"])
        self.assertEqual(client.cache.snapshot()[1], 1.001)

    async def test_upstream_failure_returns_stale_snapshot_without_touching_timestamp(self) -> None:
        source = StubCatalogSource([product("A")])
        client, clock = self._build_client(source)
        await client.fetch_products()

        source.error = CatalogUnavailableError("401 unauthorized")
        clock.now = 5.0
        products = await client.fetch_products()

        self.assertEqual([p.name for p in products], ["A"])
        self.assertEqual(client.cache.snapshot()[1], 0.0)
        self.assertFalse(client.cache.is_fresh(clock.now))

    async def test_failure_with_empty_cache_returns_empty(self) -> None:
        source = StubCatalogSource(error=CatalogUnavailableError("timeout"))
        client, _ = self._build_client(source)

        self.assertEqual(await client.fetch_products(), ())

    async def test_unexpected_exception_is_absorbed(self) -> None:
        source = StubCatalogSource(error=KeyError("retorno"))
        client, _ = self._build_client(source)

        self.assertEqual(await client.fetch_products(), ())

    async def test_empty_upstream_list_keeps_previous_snapshot(self) -> None:
        source = StubCatalogSource([product("A")])
        client, clock = self._build_client(source)
        await client.fetch_products()

        source.products = []
        clock.now = 2.0
        products = await client.fetch_products()

        self.assertEqual([p.name for p in products], ["A"])
        self.assertEqual(client.cache.snapshot()[1], 0.0)


if __name__ == "__main__":
    unittest.main()
