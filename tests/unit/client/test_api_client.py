"""Unit tests for the REST API client."""

import json

import httpx
import pytest

from src.commerce.client import ApiClientError, BulkEditSession, CommerceApiClient


def _client(handler) -> CommerceApiClient:
    return CommerceApiClient(
        "http://api.test", token="tkn", transport=httpx.MockTransport(handler)
    )


async def test_sends_bearer_token_and_unwraps_data():
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"success": True, "data": [{"id": "c1"}], "count": 1})

    async with _client(handler) as client:
        categories = await client.list_categories()

    assert categories == [{"id": "c1"}]
    assert seen[0].headers["Authorization"] == "Bearer tkn"
    assert seen[0].url.path == "/admin/categories"


async def test_query_parameters_are_forwarded():
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.params["search"] == "tea"
        assert request.url.params["page"] == "2"
        return httpx.Response(200, json={"success": True, "data": []})

    async with _client(handler) as client:
        assert await client.list_products(search="tea", page=2) == []


async def test_error_status_raises_with_message():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(404, json={"success": False, "message": "Product 'x' not found"})

    async with _client(handler) as client:
        with pytest.raises(ApiClientError) as exc_info:
            await client.get_product("x")

    assert exc_info.value.status_code == 404
    assert exc_info.value.message == "Product 'x' not found"


async def test_success_false_raises_even_with_200():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"success": False, "message": "No image found."})

    async with _client(handler) as client:
        with pytest.raises(ApiClientError, match="No image found"):
            await client.request("POST", "/seller/tools/search-image", json={"query": "x"})


async def test_transport_error_raises():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("refused", request=request)

    async with _client(handler) as client:
        with pytest.raises(ApiClientError) as exc_info:
            await client.list_categories()

    assert exc_info.value.status_code == 0


async def test_variation_stock_update():
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.method == "PATCH"
        assert request.url.path == "/seller/products/p1/variations/v1/stock"
        assert json.loads(request.content) == {"stock": "Unlimited"}
        return httpx.Response(200, json={"success": True, "data": {"id": "p1"}})

    async with _client(handler) as client:
        assert await client.update_variation_stock("p1", "v1", "Unlimited") == {"id": "p1"}


async def test_bulk_edit_saves_through_client():
    updates = {}

    def handler(request: httpx.Request) -> httpx.Response:
        product_id = request.url.path.rsplit("/", 1)[-1]
        updates[product_id] = json.loads(request.content)
        return httpx.Response(200, json={"success": True, "data": {"id": product_id}})

    bulk = BulkEditSession(
        [
            {"id": "p1", "product_name": "Tea", "price": 10},
            {"id": "p2", "product_name": "Rice", "price": 50},
        ]
    )
    bulk.edit("p2", "price", 45)

    async with _client(handler) as client:
        assert await bulk.save(client.update_product) == 1

    assert list(updates) == ["p2"]
    assert updates["p2"]["price"] == 45
