"""
Ordering of the product collection for the list view.
"""

from __future__ import annotations

import unicodedata
from typing import Iterable, List, Tuple, Union

from catalog.integrations.contracts.interfaces import Product, SortOption


def collation_key(name: str) -> Tuple[str, str, str]:
    """Case- and accent-insensitive name key; exact text decides remaining ties."""
    decomposed = unicodedata.normalize("NFKD", name)
    base = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return (base.casefold(), name.casefold(), name)


def _alphabetical_key(product: Product):
    return (collation_key(product.name), product.count, product.id)


def _count_key(product: Product):
    return (product.count, collation_key(product.name), product.id)


_SORT_KEYS = {
    SortOption.ALPHABETICAL: _alphabetical_key,
    SortOption.COUNT: _count_key,
}


def sort_products(products: Iterable[Product], sort_by: Union[SortOption, str]) -> List[Product]:
    """Return a new list of products ordered by ``sort_by``; the input is left untouched.

    alphabetical: name, then ascending count.
    count: ascending count, then name.
    """
    option = SortOption(sort_by)
    return sorted(products, key=_SORT_KEYS[option])
