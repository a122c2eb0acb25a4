"""Time-windowed cache holding the whole catalog as one unit."""

from __future__ import annotations

import threading
from collections.abc import Iterable

from storebot.models.product import Product

DEFAULT_WINDOW_SECONDS = 3600.0


class CatalogCache:
    """Most recent product list and the moment it was fetched.

    Products and timestamp are always read and replaced together under one
    lock, so a reader never pairs a new product list with an old timestamp.
    """

    def __init__(self, window_seconds: float = DEFAULT_WINDOW_SECONDS) -> None:
        if window_seconds <= 0:
            raise ValueError("Cache window must be positive.")
        self.window_seconds = window_seconds
        self._lock = threading.Lock()
        self._products: tuple[Product, ...] = ()
        self._fetched_at = 0.0

    def is_fresh(self, now: float) -> bool:
        with self._lock:
            return bool(self._products) and (now - self._fetched_at) < self.window_seconds

    def set(self, products: Iterable[Product], now: float) -> None:
        snapshot = tuple(products)
        if not snapshot:
            raise ValueError("Refusing to cache an empty product list.")
        with self._lock:
            self._products = snapshot
            self._fetched_at = max(now, self._fetched_at)

    def get(self) -> tuple[Product, ...]:
        with self._lock:
            return self._products

    def snapshot(self) -> tuple[tuple[Product, ...], float]:
        """Return products and fetch time as one consistent pair."""
        with self._lock:
            return self._products, self._fetched_at
