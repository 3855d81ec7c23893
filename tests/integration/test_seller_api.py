"""Seller API: own catalog, inline stock edits and the image lookup tool."""

import pytest

from src.commerce.entities.catalog.product import Variation
from tests.fixtures.auth import OTHER_SELLER_ID, SELLER_ID


def _data(response):
    body = response.json()
    assert body["success"] is True, body
    return body["data"]


@pytest.fixture
def own_shirt(products, session, make_product):
    product = products.create(
        make_product(
            product_name="Cotton Shirt",
            seller_id=SELLER_ID,
            variations=[Variation(id="v-m", name="Size", value="M", stock=2)],
        )
    )
    session.commit()
    return product


@pytest.fixture
def foreign_product(products, session, make_product):
    product = products.create(
        make_product(product_name="Their Rice", seller_id=OTHER_SELLER_ID, seller_name="Other")
    )
    session.commit()
    return product


class TestSellerProducts:
    def test_create_is_owned_by_caller(self, client, seller_headers):
        created = client.post(
            "/seller/products",
            json={"product_name": "Masala Chai", "price": 150, "seller_id": "someone-else"},
            headers=seller_headers,
        )

        assert created.status_code == 201
        product = _data(created)
        assert product["seller_id"] == SELLER_ID
        assert product["seller_name"] == "Acme Traders"

    def test_list_shows_only_own_products(self, client, seller_headers, own_shirt, foreign_product):
        body = client.get("/seller/products", headers=seller_headers).json()

        assert [p["id"] for p in body["data"]] == [own_shirt.id]
        assert body["pagination"]["total"] == 1

    def test_foreign_product_is_forbidden(self, client, seller_headers, foreign_product):
        url = f"/seller/products/{foreign_product.id}"

        assert client.get(url, headers=seller_headers).status_code == 403
        assert client.put(url, json={"price": 1}, headers=seller_headers).status_code == 403

    def test_update_own_product(self, client, seller_headers, own_shirt):
        response = client.put(
            f"/seller/products/{own_shirt.id}", json={"publish": False}, headers=seller_headers
        )
        assert _data(response)["publish"] is False

    def test_variation_stock(self, client, seller_headers, own_shirt):
        url = f"/seller/products/{own_shirt.id}/variations/v-m/stock"

        updated = _data(client.patch(url, json={"stock": "Unlimited"}, headers=seller_headers))
        assert updated["variations"][0]["stock"] == "Unlimited"

        bad = client.patch(url, json={"stock": -4}, headers=seller_headers)
        assert bad.status_code == 422

        missing = client.patch(
            f"/seller/products/{own_shirt.id}/variations/v-x/stock",
            json={"stock": 1},
            headers=seller_headers,
        )
        assert missing.status_code == 404

    def test_stock_listing_is_scoped(self, client, seller_headers, own_shirt, foreign_product):
        body = client.get("/seller/stock", headers=seller_headers).json()

        assert [row["id"] for row in body["data"]] == [f"{own_shirt.id}-0"]


class TestImageSearchTool:
    URL = "/seller/tools/search-image"

    def test_query_required(self, client, seller_headers):
        response = client.post(self.URL, json={"query": "  "}, headers=seller_headers)

        assert response.status_code == 400
        assert response.json()["message"] == "Search query is required"

    def test_not_found_is_reported_with_200(self, client, seller_headers, image_providers):
        response = client.post(self.URL, json={"query": "teapot"}, headers=seller_headers)

        assert response.status_code == 200
        assert response.json() == {"success": False, "message": "No image found."}
        assert image_providers.calls == []

    def test_uses_key_stored_by_admin(
        self, client, seller_headers, admin_headers, image_providers
    ):
        client.put(
            "/admin/settings/image-search",
            json={"gemini_api_key": "stored-key"},
            headers=admin_headers,
        )
        image_providers.google_items = [{"link": "https://img.test/teapot.jpg"}]

        response = client.post(self.URL, json={"query": "teapot"}, headers=seller_headers)

        assert _data(response) == {"image_url": "https://img.test/teapot.jpg", "provider": "google"}
        assert image_providers.calls[0].url.params["key"] == "stored-key"

    def test_requires_seller_role(self, client, customer_headers):
        response = client.post(self.URL, json={"query": "teapot"}, headers=customer_headers)
        assert response.status_code == 403
