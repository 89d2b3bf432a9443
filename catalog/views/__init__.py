"""
In-memory views hosted per browser session: the product list and the product detail.
"""

from .load_state import InvalidTransition, LoadState, LoadStatus
from .product_detail import ProductDetailView
from .product_list import ProductListView

__all__ = [
    "InvalidTransition",
    "LoadState",
    "LoadStatus",
    "ProductDetailView",
    "ProductListView",
]
