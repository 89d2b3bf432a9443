"""Pytest fixtures for catalog views, clients and routes."""

import copy
from typing import List, Optional

import pytest

from catalog.integrations.contracts.interfaces import Comment, Product, ProductCatalogueClient, Size
from catalog.integrations.response_wrappers import CatalogFetchError
from catalog.utils.id_generator import MonotonicIdGenerator


class FakeCatalogueClient(ProductCatalogueClient):
    """In-memory catalogue source that counts requests and can hold or fail them."""

    def __init__(self, products: Optional[List[Product]] = None, error: Optional[Exception] = None):
        self.products = products or []
        self.error = error
        self.list_calls = 0
        self.get_calls: List[int] = []
        # set to an asyncio.Event to keep responses in flight until it is set
        self.release = None

    async def list_products(self) -> List[Product]:
        self.list_calls += 1
        if self.release is not None:
            await self.release.wait()
        if self.error is not None:
            raise self.error
        return copy.deepcopy(self.products)

    async def get_product(self, product_id: int) -> Product:
        self.get_calls.append(product_id)
        if self.release is not None:
            await self.release.wait()
        if self.error is not None:
            raise self.error
        for product in self.products:
            if product.id == product_id:
                return copy.deepcopy(product)
        raise CatalogFetchError(f"Product {product_id} not found")


def make_product(product_id: int, name: str, count: int, comments=None) -> Product:
    return Product(
        id=product_id,
        image_url=f"http://img.test/{product_id}.png",
        name=name,
        count=count,
        size=Size(width=10, height=20),
        weight="1kg",
        comments=comments or [],
    )


@pytest.fixture
def products() -> List[Product]:
    return [
        make_product(1, "Desk Lamp", 12),
        make_product(2, "ceramic mug", 40),
        make_product(
            3,
            "Bookshelf",
            3,
            comments=[
                Comment(id=1, product_id=3, description="first", date="2024-02-11T08:00:00+00:00"),
                Comment(id=2, product_id=3, description="second", date="2024-02-12T08:00:00+00:00"),
                Comment(id=3, product_id=3, description="third", date="2024-02-13T08:00:00+00:00"),
            ],
        ),
        make_product(4, "Notebook", 12),
    ]


@pytest.fixture
def fake_client(products) -> FakeCatalogueClient:
    return FakeCatalogueClient(products=products)


@pytest.fixture
def failing_client() -> FakeCatalogueClient:
    return FakeCatalogueClient(error=CatalogFetchError("GET http://catalog.test/products failed: connection refused"))


@pytest.fixture
def fixed_ids() -> MonotonicIdGenerator:
    """Id generator whose clock never advances, as with several creations in one millisecond."""
    return MonotonicIdGenerator(clock=lambda: 1_700_000_000_000)
