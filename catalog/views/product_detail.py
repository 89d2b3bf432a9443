"""
Detail view: one product, its edit draft and its comment thread.

Nothing here is written back to the product service; edits and comments only
live as long as the view does.
"""

from __future__ import annotations

import copy
import logging
from datetime import datetime, timezone
from typing import Any, Callable, Dict, Optional

from catalog.integrations.contracts.interfaces import Comment, Product, ProductCatalogueClient
from catalog.integrations.response_wrappers import CatalogFetchError
from catalog.utils.id_generator import MonotonicIdGenerator, default_id_generator
from catalog.validation import apply_field_value, apply_field_values
from catalog.views.load_state import LoadState

logger = logging.getLogger(__name__)

EDITABLE_FIELDS = ("image_url", "name", "count", "size", "weight")


def _utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


class ProductDetailView:
    def __init__(
        self,
        client: ProductCatalogueClient,
        product_id: int,
        id_generator: Optional[MonotonicIdGenerator] = None,
        clock: Optional[Callable[[], str]] = None,
    ) -> None:
        self.client = client
        self.product_id = product_id
        self.product: Optional[Product] = None
        self.load_state: LoadState[Product] = LoadState()
        self.active = True
        self.edit_open = False
        self.edit_draft: Optional[Product] = None
        self._ids = id_generator or default_id_generator
        self._clock = clock or _utc_now_iso

    @property
    def is_loading(self) -> bool:
        """True until a product has been loaded; a failed fetch keeps the view in this state."""
        return self.product is None

    async def activate(self) -> None:
        if not self.load_state.is_idle:
            return
        self.load_state.start()

        try:
            product = await self.client.get_product(self.product_id)
        except CatalogFetchError as exc:
            if not self.active:
                logger.debug("Ignoring failed fetch of product %s for an inactive view: %s", self.product_id, exc)
                return
            logger.error("Error loading product %s: %s", self.product_id, exc)
            self.load_state.fail(str(exc))
            return

        if not self.active:
            logger.debug("Ignoring product %s fetched after the detail view was closed", self.product_id)
            return

        self.product = product
        self.load_state.succeed(copy.deepcopy(product))

    def deactivate(self) -> None:
        self.active = False

    # --- Edit ----------------------------------------------------------------

    def open_edit(self) -> bool:
        if self.product is None:
            return False
        self.edit_draft = copy.deepcopy(self.product)
        self.edit_open = True
        return True

    def update_edit_field(self, field: str, value: Any) -> bool:
        if self.edit_draft is None:
            return False
        apply_field_value(self.edit_draft, field, value)
        return True

    def update_edit_fields(self, values: Dict[str, Any]) -> bool:
        if self.edit_draft is None:
            return False
        apply_field_values(self.edit_draft, values)
        return True

    def save_edit(self) -> bool:
        if self.product is None or self.edit_draft is None:
            return False
        for name in EDITABLE_FIELDS:
            setattr(self.product, name, copy.deepcopy(getattr(self.edit_draft, name)))
        self.edit_draft = None
        self.edit_open = False
        logger.info("Saved local edits to product %s", self.product.id)
        return True

    def cancel_edit(self) -> None:
        self.edit_draft = None
        self.edit_open = False

    # --- Comments ------------------------------------------------------------

    def add_comment(self, text: str) -> Optional[Comment]:
        if self.product is None:
            return None
        description = (text or "").strip()
        if not description:
            logger.debug("Blank comment ignored for product %s", self.product.id)
            return None

        comment = Comment(
            id=self._ids.next_id(taken={c.id for c in self.product.comments}),
            product_id=self.product.id,
            description=description,
            date=self._clock(),
        )
        self.product.comments = [*self.product.comments, comment]
        return comment

    def delete_comment(self, comment_id: int) -> bool:
        if self.product is None:
            return False
        remaining = [c for c in self.product.comments if c.id != comment_id]
        if len(remaining) == len(self.product.comments):
            return False
        self.product.comments = remaining
        return True

    # --- Serialization -------------------------------------------------------

    def snapshot(self) -> Dict[str, Any]:
        return {
            "load_state": self.load_state.to_dict(),
            "loading": self.is_loading,
            "product": self.product.to_dict() if self.product else None,
            "edit": {
                "open": self.edit_open,
                "draft": self.edit_draft.to_dict() if self.edit_draft else None,
            },
        }
