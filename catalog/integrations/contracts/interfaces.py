from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Union


Number = Union[int, float]


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------

class SortOption(str, Enum):
    ALPHABETICAL = "alphabetical"
    COUNT = "count"


# ---------------------------------------------------------------------------
# Shared data models
# ---------------------------------------------------------------------------

@dataclass
class Size:
    width: Number
    height: Number

    def to_dict(self) -> Dict[str, Any]:
        return {"width": self.width, "height": self.height}


@dataclass
class Comment:
    id: int
    product_id: int                      # back-reference to the owning product
    description: str
    date: str                            # ISO-8601 timestamp

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "productId": self.product_id,
            "description": self.description,
            "date": self.date,
        }


@dataclass
class ProductDraft:
    """Unsaved product form; becomes a Product once an id is assigned."""
    image_url: str = ""
    name: str = ""
    count: int = 0
    size: Size = field(default_factory=lambda: Size(width=0, height=0))
    weight: str = ""                     # free-form, e.g. "200g"
    comments: List[Comment] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "imageUrl": self.image_url,
            "name": self.name,
            "count": self.count,
            "size": self.size.to_dict(),
            "weight": self.weight,
            "comments": [c.to_dict() for c in self.comments],
        }


@dataclass
class Product:
    id: int
    image_url: str
    name: str
    count: int
    size: Size
    weight: str
    comments: List[Comment] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "imageUrl": self.image_url,
            "name": self.name,
            "count": self.count,
            "size": self.size.to_dict(),
            "weight": self.weight,
            "comments": [c.to_dict() for c in self.comments],
        }


# ---------------------------------------------------------------------------
# Abstract catalogue source
# ---------------------------------------------------------------------------

class ProductCatalogueClient(ABC):
    """Read-only product source. Every catalogue client must implement this interface."""

    @abstractmethod
    async def list_products(self) -> List[Product]:
        """Return the full product collection in service order."""

    @abstractmethod
    async def get_product(self, product_id: int) -> Product:
        """Fetch a single product by ID."""
