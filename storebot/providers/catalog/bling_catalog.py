"""Bling v2 catalog source."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from storebot.interfaces.catalog_source import CatalogSource, CatalogUnavailableError
from storebot.models.product import Product

logger = logging.getLogger(__name__)


class BlingCatalogSource(CatalogSource):
    """Fetches the product list from the Bling v2 JSON API in one page."""

    def __init__(
        self,
        *,
        api_key: str | None,
        api_url: str,
        page_size: int = 100,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.api_key = api_key
        self.api_url = api_url
        self.page_size = page_size
        self.timeout = timeout
        self._transport = transport

    async def fetch_products(self) -> list[Product]:
        if not self.api_key:
            raise CatalogUnavailableError("BLING_API_KEY not configured")

        params = {"apikey": self.api_key, "limite": self.page_size}
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                response = await client.get(self.api_url, params=params)
                response.raise_for_status()
                payload = response.json()
        except httpx.HTTPStatusError as exc:
            raise CatalogUnavailableError(
                f"Bling answered HTTP {exc.response.status_code}"
            ) from exc
        except httpx.HTTPError as exc:
            raise CatalogUnavailableError(f"Bling request failed: {exc}") from exc
        except ValueError as exc:
            raise CatalogUnavailableError("Bling returned a non-JSON body") from exc

        products = self._parse_products(payload)
        logger.info("Loaded %s products from Bling.", len(products))
        return products

    def _parse_products(self, payload: Any) -> list[Product]:
        retorno = payload.get("retorno") if isinstance(payload, dict) else None
        if not isinstance(retorno, dict):
            raise CatalogUnavailableError("Bling response has no 'retorno' envelope")

        raw_products = retorno.get("produtos")
        if not isinstance(raw_products, list) or not raw_products:
            errors = retorno.get("erros")
            raise CatalogUnavailableError(f"Bling response has no products (erros={errors!r})")

        products = [Product.from_bling(raw) for raw in raw_products if isinstance(raw, dict)]
        if not products:
            raise CatalogUnavailableError("Bling product entries are malformed")
        return products
