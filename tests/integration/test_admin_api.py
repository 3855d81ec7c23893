"""Admin API: catalog, stock, marketing, service requests and settings."""

import csv
import io

import pytest

from src.commerce.entities.catalog.product import Variation
from src.commerce.entities.service_request import RequestKind, ServiceRequest


def _data(response):
    body = response.json()
    assert body["success"] is True, body
    return body["data"]


class TestCategories:
    def test_create_and_list(self, client, admin_headers):
        created = client.post("/admin/categories", json={"name": "Grocery"}, headers=admin_headers)
        assert created.status_code == 201
        parent = _data(created)

        child = client.post(
            "/admin/categories",
            json={"name": "Rice", "parent_id": parent["id"]},
            headers=admin_headers,
        )
        assert child.status_code == 201

        listing = client.get("/admin/categories", headers=admin_headers).json()
        assert listing["count"] == 2

        children = client.get(
            "/admin/categories", params={"parent_id": parent["id"]}, headers=admin_headers
        )
        assert [c["name"] for c in _data(children)] == ["Rice"]

    def test_unknown_parent(self, client, admin_headers):
        response = client.post(
            "/admin/categories", json={"name": "Rice", "parent_id": "nope"}, headers=admin_headers
        )
        assert response.status_code == 404

    def test_category_cannot_parent_itself(self, client, admin_headers):
        category = _data(client.post("/admin/categories", json={"name": "A"}, headers=admin_headers))

        response = client.put(
            f"/admin/categories/{category['id']}",
            json={"parent_id": category["id"]},
            headers=admin_headers,
        )
        assert response.status_code == 409

    def test_rename(self, client, admin_headers):
        category = _data(client.post("/admin/categories", json={"name": "A"}, headers=admin_headers))

        response = client.put(
            f"/admin/categories/{category['id']}", json={"name": "Beverages"}, headers=admin_headers
        )
        assert _data(response)["name"] == "Beverages"

    def test_delete_blocked_by_children(self, client, admin_headers):
        parent = _data(client.post("/admin/categories", json={"name": "P"}, headers=admin_headers))
        client.post(
            "/admin/categories", json={"name": "C", "parent_id": parent["id"]}, headers=admin_headers
        )

        assert client.delete(f"/admin/categories/{parent['id']}", headers=admin_headers).status_code == 409

    def test_delete(self, client, admin_headers):
        category = _data(client.post("/admin/categories", json={"name": "A"}, headers=admin_headers))

        assert client.delete(f"/admin/categories/{category['id']}", headers=admin_headers).status_code == 200
        assert client.delete(f"/admin/categories/{category['id']}", headers=admin_headers).status_code == 404


class TestProducts:
    def test_crud(self, client, admin_headers):
        created = client.post(
            "/admin/products",
            json={"product_name": "Green Tea", "price": 120, "stock": "unlimited"},
            headers=admin_headers,
        )
        assert created.status_code == 201
        product = _data(created)
        assert product["stock"] == "Unlimited"

        fetched = _data(client.get(f"/admin/products/{product['id']}", headers=admin_headers))
        assert fetched["product_name"] == "Green Tea"

        updated = _data(
            client.put(
                f"/admin/products/{product['id']}",
                json={"price": 110, "publish": True},
                headers=admin_headers,
            )
        )
        assert updated["price"] == 110
        assert updated["publish"] is True
        assert updated["stock"] == "Unlimited"

        assert client.delete(f"/admin/products/{product['id']}", headers=admin_headers).status_code == 200
        assert client.get(f"/admin/products/{product['id']}", headers=admin_headers).status_code == 404

    def test_list_is_paginated(self, client, admin_headers, products, session, make_product):
        for index in range(3):
            products.create(make_product(product_name=f"Tea {index}"))
        products.create(make_product(product_name="Coffee", publish=False))
        session.commit()

        body = client.get(
            "/admin/products", params={"search": "tea", "limit": 2}, headers=admin_headers
        ).json()
        assert len(body["data"]) == 2
        assert body["pagination"] == {"page": 1, "limit": 2, "total": 3, "total_pages": 2}

        unpublished = client.get(
            "/admin/products", params={"publish": "false"}, headers=admin_headers
        ).json()
        assert [p["product_name"] for p in unpublished["data"]] == ["Coffee"]

    def test_invalid_update(self, client, admin_headers, products, session, make_product):
        product = products.create(make_product())
        session.commit()

        response = client.put(
            f"/admin/products/{product.id}", json={"price": -1}, headers=admin_headers
        )
        assert response.status_code == 422


class TestStock:
    @pytest.fixture
    def seeded(self, products, session, make_product):
        products.create(
            make_product(
                id="p-shirt",
                product_name="Cotton Shirt",
                variations=[
                    Variation(id="v-m", name="Size", value="M", stock=2),
                    Variation(id="v-l", name="Size", value="L", stock="Unlimited"),
                ],
            )
        )
        products.create(make_product(id="p-salt", product_name="Sea Salt", stock=0))
        session.commit()

    def test_list_sorted_and_filtered(self, client, admin_headers, seeded):
        body = client.get(
            "/admin/stock", params={"sort_by": "stock", "sort_dir": "desc"}, headers=admin_headers
        ).json()

        assert [row["id"] for row in body["data"]] == ["p-shirt-1", "p-shirt-0", "p-salt"]
        assert body["pagination"]["total"] == 3

        out = client.get(
            "/admin/stock", params={"stock": "Out of Stock"}, headers=admin_headers
        ).json()
        assert [row["id"] for row in out["data"]] == ["p-salt"]

    def test_unknown_sort_column(self, client, admin_headers, seeded):
        response = client.get("/admin/stock", params={"sort_by": "price"}, headers=admin_headers)
        assert response.status_code == 400

    def test_export_csv(self, client, admin_headers, seeded):
        response = client.get("/admin/stock/export", params={"limit": 1}, headers=admin_headers)

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/csv")
        assert "stock_management_" in response.headers["content-disposition"]
        rows = list(csv.reader(io.StringIO(response.text)))
        assert rows[0][0] == "Variation Id"
        assert len(rows) == 4


class TestMarketing:
    def test_banner_crud_and_legacy_position(self, client, admin_headers):
        created = client.post(
            "/admin/banners",
            json={"position": "HOME_MAIN_SLIDER", "image_url": "https://img.test/1.jpg"},
            headers=admin_headers,
        )
        assert created.status_code == 201
        banner = _data(created)
        assert banner["position"] == "Main Banner"
        assert banner["image"] == "https://img.test/1.jpg"

        listing = client.get(
            "/admin/banners", params={"position": "Main Banner"}, headers=admin_headers
        ).json()
        assert listing["count"] == 1

        updated = client.put(
            f"/admin/banners/{banner['id']}", json={"is_active": False}, headers=admin_headers
        )
        assert _data(updated)["is_active"] is False

        assert client.delete(f"/admin/banners/{banner['id']}", headers=admin_headers).status_code == 200

    def test_unknown_banner_position(self, client, admin_headers):
        response = client.get("/admin/banners", params={"position": "Sidebar"}, headers=admin_headers)
        assert response.status_code == 400

    def test_deals_created_on_first_read(self, client, admin_headers):
        first = _data(client.get("/admin/deals", headers=admin_headers))
        second = _data(client.get("/admin/deals", headers=admin_headers))

        assert first["id"] == second["id"]
        assert first["featured_deal_product_ids"] == []

    def test_update_deals(self, client, admin_headers):
        response = client.put(
            "/admin/deals",
            json={
                "flash_deal_target_date": "2030-01-01T00:00:00Z",
                "deal_of_the_day_product_ids": ["p1"],
            },
            headers=admin_headers,
        )

        config = _data(response)
        assert config["flash_deal_target_date"].startswith("2030-01-01T00:00:00")
        assert config["deal_of_the_day_product_ids"] == ["p1"]

    def test_video_finds(self, client, admin_headers):
        created = client.post(
            "/admin/video-finds",
            json={"title": "Kettle demo", "price": 899, "original_price": 1299, "video_url": "v.mp4"},
            headers=admin_headers,
        )
        video = _data(created)
        assert video["views"] == "0"

        updated = client.put(
            f"/admin/video-finds/{video['id']}", json={"views": "1.2k"}, headers=admin_headers
        )
        assert _data(updated)["views"] == "1.2k"
        assert client.get("/admin/video-finds", headers=admin_headers).json()["count"] == 1
        assert client.delete(f"/admin/video-finds/{video['id']}", headers=admin_headers).status_code == 200


class TestServiceRequests:
    @pytest.fixture
    def pending_return(self, service_requests, session) -> ServiceRequest:
        request = service_requests.create(
            ServiceRequest(
                kind=RequestKind.RETURN,
                order_id="ORD-1",
                customer_id="customer-1",
                customer_name="Asha",
                product_name="Cotton Shirt",
                reason="Too small",
            )
        )
        session.commit()
        return request

    def test_list_and_search(self, client, admin_headers, pending_return):
        body = client.get(
            "/admin/service-requests", params={"kind": "return", "search": "asha"}, headers=admin_headers
        ).json()
        assert [r["id"] for r in body["data"]] == [pending_return.id]

        replacements = client.get(
            "/admin/service-requests", params={"kind": "replacement"}, headers=admin_headers
        ).json()
        assert replacements["count"] == 0

    def test_approve_return_needs_assignee(self, client, admin_headers, pending_return):
        response = client.post(
            f"/admin/service-requests/{pending_return.id}/approve", json={}, headers=admin_headers
        )
        assert response.status_code == 400

    def test_approve_then_conflict(self, client, admin_headers, pending_return):
        url = f"/admin/service-requests/{pending_return.id}/approve"

        approved = _data(client.post(url, json={"delivery_assignee": "Ravi"}, headers=admin_headers))
        assert approved["status"] == "Approved"
        assert approved["pickup_status"] == "Pending Pickup"

        again = client.post(url, json={"delivery_assignee": "Ravi"}, headers=admin_headers)
        assert again.status_code == 409

    def test_reject(self, client, admin_headers, pending_return):
        url = f"/admin/service-requests/{pending_return.id}/reject"

        assert client.post(url, json={"reason": " "}, headers=admin_headers).status_code == 400
        rejected = _data(client.post(url, json={"reason": "Worn"}, headers=admin_headers))
        assert rejected["status"] == "Rejected"
        assert rejected["rejection_reason"] == "Worn"

    def test_unknown_request(self, client, admin_headers):
        response = client.post(
            "/admin/service-requests/missing/reject", json={"reason": "x"}, headers=admin_headers
        )
        assert response.status_code == 404


class TestSettings:
    def test_barcode(self, client, admin_headers):
        assert _data(client.get("/admin/settings/barcode", headers=admin_headers))["width"] == 38

        saved = _data(
            client.put("/admin/settings/barcode", json={"height": 30}, headers=admin_headers)
        )
        assert saved["height"] == 30
        assert saved["width"] == 38

    def test_product_display(self, client, admin_headers):
        sections = _data(client.get("/admin/settings/product-display", headers=admin_headers))
        sections[0]["fields"][0]["is_enabled"] = False

        saved = _data(
            client.put("/admin/settings/product-display", json=sections, headers=admin_headers)
        )
        assert saved[0]["fields"][0]["is_enabled"] is False

    def test_image_search_key_is_write_only(self, client, admin_headers):
        before = _data(client.get("/admin/settings/image-search", headers=admin_headers))
        assert before["has_api_key"] is False
        assert before["google_cx_id"]

        saved = _data(
            client.put(
                "/admin/settings/image-search",
                json={"gemini_api_key": "secret-key", "google_cx_id": "cx-9"},
                headers=admin_headers,
            )
        )
        assert saved == {"has_api_key": True, "google_cx_id": "cx-9"}
