"""
Local Product Catalogue Client (Mock/Local).

Purpose:
- Acts as a development-time product source when the product service is not running.
- Loads product records from a local JSON file in the same shape the service returns.

Usage:
- Wired in catalog/api/main.py when CATALOG_USE_LOCAL_DATA is enabled
- Called by the views through the ProductCatalogueClient interface

The file is re-read on every call so edits to it show up on the next view activation.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, List, Optional

from catalog.integrations.contracts.interfaces import Product, ProductCatalogueClient
from catalog.integrations.response_wrappers import (
    CatalogFetchError,
    IntegrationResponseError,
    normalize_product_list,
)

logger = logging.getLogger(__name__)


class LocalProductsClient(ProductCatalogueClient):
    def __init__(self, data_path: Optional[Path] = None) -> None:
        self.data_path = Path(data_path) if data_path else self._default_data_path()

    async def list_products(self) -> List[Product]:
        return self._load()

    async def get_product(self, product_id: int) -> Product:
        for product in self._load():
            if product.id == product_id:
                return product
        raise CatalogFetchError(f"Product {product_id} not found in {self.data_path}")

    def _load(self) -> List[Product]:
        raw = self._read_json()
        try:
            return normalize_product_list(raw)
        except IntegrationResponseError as exc:
            raise CatalogFetchError(f"Malformed local product data: {exc}", payload=exc.payload) from exc

    def _read_json(self) -> Any:
        try:
            with open(self.data_path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError as exc:
            raise CatalogFetchError(f"Local product data not found: {self.data_path}") from exc
        except json.JSONDecodeError as exc:
            raise CatalogFetchError(f"Local product data is not valid JSON: {exc}") from exc

        # json-server style files wrap the collection: {"products": [...]}
        if isinstance(data, dict) and "products" in data:
            data = data["products"]
        logger.debug("Loaded local product data from %s", self.data_path)
        return data

    @staticmethod
    def _default_data_path() -> Path:
        return Path(__file__).resolve().parents[4] / "data" / "products.json"
