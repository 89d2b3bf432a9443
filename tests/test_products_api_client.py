import httpx
import pytest

from catalog.integrations.clients.real_http.products_api import RealProductsClient
from catalog.integrations.response_wrappers import CatalogFetchError

RECORDS = [
    {
        "id": 1,
        "imageUrl": "http://img.test/1.png",
        "name": "Desk Lamp",
        "count": 12,
        "size": {"width": 20, "height": 45},
        "weight": "1.2kg",
        "comments": [],
    },
    {
        "id": 2,
        "imageUrl": "http://img.test/2.png",
        "name": "Mug",
        "count": 40,
        "size": {"width": 9, "height": 11},
        "weight": "350g",
        "comments": [],
    },
]


def _client(handler) -> RealProductsClient:
    return RealProductsClient(base_url="http://catalog.test/", transport=httpx.MockTransport(handler))


@pytest.mark.asyncio
async def test_list_products_reads_collection():
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append((request.method, str(request.url)))
        return httpx.Response(200, json=RECORDS)

    products = await _client(handler).list_products()
    assert [p.name for p in products] == ["Desk Lamp", "Mug"]
    assert seen == [("GET", "http://catalog.test/products")]


@pytest.mark.asyncio
async def test_get_product_uses_id_path():
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path == "/products/2"
        return httpx.Response(200, json=RECORDS[1])

    product = await _client(handler).get_product(2)
    assert product.id == 2
    assert product.weight == "350g"


@pytest.mark.asyncio
async def test_error_status_becomes_fetch_error():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(404, json={"error": "not found"})

    with pytest.raises(CatalogFetchError) as exc_info:
        await _client(handler).get_product(99)
    assert exc_info.value.payload == {"status_code": 404}


@pytest.mark.asyncio
async def test_transport_error_becomes_fetch_error():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(CatalogFetchError):
        await _client(handler).list_products()


@pytest.mark.asyncio
async def test_non_json_body_becomes_fetch_error():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, content=b"<html>oops</html>")

    with pytest.raises(CatalogFetchError):
        await _client(handler).list_products()


@pytest.mark.asyncio
async def test_malformed_record_becomes_fetch_error():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json=[{"id": 1, "name": "no size"}])

    with pytest.raises(CatalogFetchError):
        await _client(handler).list_products()


def test_base_url_falls_back_to_environment(monkeypatch):
    monkeypatch.setenv("CATALOG_API_URL", "http://env.test:9000/")
    assert RealProductsClient().base_url == "http://env.test:9000"
