"""
List view: the product collection, its sort order, the add form and the
two-step delete confirmation.

The collection is loaded once per activation from the catalogue client and is
then owned by this view. Adds and deletes change only the in-memory list.
"""

from __future__ import annotations

import copy
import logging
from typing import Any, Dict, List, Optional, Union

from catalog.integrations.contracts.interfaces import (
    Product,
    ProductCatalogueClient,
    ProductDraft,
    SortOption,
)
from catalog.integrations.response_wrappers import CatalogFetchError
from catalog.sorting import sort_products
from catalog.utils.id_generator import MonotonicIdGenerator, default_id_generator
from catalog.validation import apply_field_value, apply_field_values, validate_product_draft
from catalog.views.load_state import LoadState

logger = logging.getLogger(__name__)


class ProductListView:
    def __init__(
        self,
        client: ProductCatalogueClient,
        sort_by: Union[SortOption, str] = SortOption.ALPHABETICAL,
        id_generator: Optional[MonotonicIdGenerator] = None,
    ) -> None:
        self.client = client
        self.products: List[Product] = []
        # data holds the collection exactly as the service returned it
        self.load_state: LoadState[List[Product]] = LoadState()
        self.sort_by = SortOption(sort_by)
        self.active = True
        self.add_open = False
        self.draft = ProductDraft()
        self.delete_candidate: Optional[int] = None
        self._ids = id_generator or default_id_generator

    # --- Loading -------------------------------------------------------------

    async def activate(self) -> None:
        """Fetch the collection. Only the first call of an activation issues a request."""
        if not self.load_state.is_idle:
            return
        self.load_state.start()

        try:
            products = await self.client.list_products()
        except CatalogFetchError as exc:
            if not self.active:
                logger.debug("Ignoring failed product fetch for an inactive list view: %s", exc)
                return
            logger.error("Error loading products: %s", exc)
            self.load_state.fail(str(exc))
            return

        if not self.active:
            logger.debug("Ignoring %d products fetched after the list view was closed", len(products))
            return

        self.products = list(products)
        self.load_state.succeed(list(products))
        logger.info("Loaded %d products", len(self.products))

    def deactivate(self) -> None:
        self.active = False

    # --- Sorting -------------------------------------------------------------

    def set_sort(self, sort_by: Union[SortOption, str]) -> None:
        self.sort_by = SortOption(sort_by)

    def sorted_products(self) -> List[Product]:
        return sort_products(self.products, self.sort_by)

    # --- Add -----------------------------------------------------------------

    def add_product(self, draft: ProductDraft) -> Optional[Product]:
        """Append a product built from ``draft``; incomplete drafts are refused."""
        errors = validate_product_draft(draft)
        if errors:
            logger.info("Product draft rejected: %s", ", ".join(sorted(errors)))
            return None

        product = Product(
            id=self._ids.next_id(taken={p.id for p in self.products}),
            image_url=draft.image_url,
            name=draft.name,
            count=draft.count,
            size=copy.deepcopy(draft.size),
            weight=draft.weight,
            comments=copy.deepcopy(draft.comments),
        )
        self.products = [*self.products, product]
        logger.info("Added product %s (%s) locally", product.id, product.name)
        return product

    def open_add(self) -> None:
        self.add_open = True

    def close_add(self) -> None:
        self.add_open = False

    def update_draft_field(self, field: str, value: Any) -> None:
        apply_field_value(self.draft, field, value)

    def update_draft_fields(self, values: Dict[str, Any]) -> None:
        apply_field_values(self.draft, values)

    def can_submit_draft(self) -> bool:
        return not validate_product_draft(self.draft)

    def confirm_add(self) -> Optional[Product]:
        product = self.add_product(self.draft)
        if product is not None:
            self.add_open = False
            self.draft = ProductDraft()
        return product

    # --- Delete --------------------------------------------------------------

    def delete_product(self, product_id: int) -> bool:
        remaining = [p for p in self.products if p.id != product_id]
        if len(remaining) == len(self.products):
            return False
        self.products = remaining
        logger.info("Deleted product %s locally", product_id)
        return True

    def request_delete(self, product_id: int) -> None:
        self.delete_candidate = product_id

    def confirm_delete(self) -> bool:
        if self.delete_candidate is None:
            return False
        removed = self.delete_product(self.delete_candidate)
        self.delete_candidate = None
        return removed

    def cancel_delete(self) -> None:
        self.delete_candidate = None

    # --- Serialization -------------------------------------------------------

    def snapshot(self) -> Dict[str, Any]:
        return {
            "load_state": self.load_state.to_dict(),
            "sort_by": self.sort_by.value,
            "products": [p.to_dict() for p in self.sorted_products()],
            "delete_candidate": self.delete_candidate,
            "add_form": {
                "open": self.add_open,
                "draft": self.draft.to_dict(),
                "can_submit": self.can_submit_draft(),
            },
        }
