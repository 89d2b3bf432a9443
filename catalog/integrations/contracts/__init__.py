"""
Contracts (data models).

This folder defines the shapes exchanged with the product service:
- Product / Size / Comment records as the views hold them
- The read-only ProductCatalogueClient interface

Both mock and real HTTP clients return these models, so views never handle
raw JSON dicts.
"""

from .interfaces import (
    Comment,
    Product,
    ProductCatalogueClient,
    ProductDraft,
    Size,
    SortOption,
)

__all__ = [
    "Comment",
    "Product",
    "ProductCatalogueClient",
    "ProductDraft",
    "Size",
    "SortOption",
]
