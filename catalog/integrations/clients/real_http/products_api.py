"""
Real Product Catalogue HTTP Client.

Purpose:
- Reads the product collection and single products from the product service
- Normalizes every record into the Product contract shape

Usage:
- Wired in catalog/api/main.py when the product service is reachable
- Called by ProductListView / ProductDetailView through the ProductCatalogueClient interface

Important:
- This client is read-only. The service defines no write endpoints, so view
  mutations are never sent upstream.
"""

from __future__ import annotations

import logging
import os
from typing import Any, List, Optional

import httpx

from catalog.integrations.contracts.interfaces import Product, ProductCatalogueClient
from catalog.integrations.response_wrappers import (
    CatalogFetchError,
    IntegrationResponseError,
    normalize_product_list,
    normalize_product_payload,
)

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "http://localhost:3033"


class RealProductsClient(ProductCatalogueClient):
    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout_seconds: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.base_url = (base_url or os.getenv("CATALOG_API_URL", DEFAULT_BASE_URL)).rstrip("/")
        self.timeout_seconds = timeout_seconds
        self._transport = transport

    async def list_products(self) -> List[Product]:
        data = await self._get_json("/products")
        try:
            return normalize_product_list(data)
        except IntegrationResponseError as exc:
            raise CatalogFetchError(f"Malformed product collection: {exc}", payload=exc.payload) from exc

    async def get_product(self, product_id: int) -> Product:
        data = await self._get_json(f"/products/{product_id}")
        try:
            return normalize_product_payload(data)
        except IntegrationResponseError as exc:
            raise CatalogFetchError(f"Malformed product {product_id}: {exc}", payload=exc.payload) from exc

    async def _get_json(self, path: str) -> Any:
        url = f"{self.base_url}{path}"
        logger.debug("GET %s", url)
        try:
            async with httpx.AsyncClient(timeout=self.timeout_seconds, transport=self._transport) as client:
                response = await client.get(url, headers={"Accept": "application/json"})
                response.raise_for_status()
                return response.json()
        except httpx.HTTPStatusError as exc:
            raise CatalogFetchError(
                f"GET {url} returned HTTP {exc.response.status_code}",
                payload={"status_code": exc.response.status_code},
            ) from exc
        except httpx.HTTPError as exc:
            raise CatalogFetchError(f"GET {url} failed: {exc}") from exc
        except ValueError as exc:
            raise CatalogFetchError(f"GET {url} returned a body that is not JSON") from exc
