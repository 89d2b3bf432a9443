"""
Integrations layer.
This package contains all code used to communicate with the product service:
- the read-only product catalogue REST API (GET /products, GET /products/{id})
- a local JSON product file for development

Key rule:
- Views MUST NOT call the product service directly.
- Views call integration clients (under catalog/integrations/clients).
- The selection of local vs real clients happens in ONE place (catalog/api/main.py).

Note: the product service exposes no write endpoints. Adds, deletes, edits
and comments live in view memory only.
"""

from .contracts.interfaces import (
    Comment,
    Product,
    ProductCatalogueClient,
    ProductDraft,
    Size,
    SortOption,
)
from .response_wrappers import (
    CatalogFetchError,
    IntegrationResponseError,
    normalize_product_list,
    normalize_product_payload,
)

__all__ = [
    # contracts
    "Comment", "Product", "ProductCatalogueClient", "ProductDraft", "Size", "SortOption",
    # response normalization
    "CatalogFetchError", "IntegrationResponseError",
    "normalize_product_list", "normalize_product_payload",
]
