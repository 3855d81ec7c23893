"""Unit tests for the bulk edit session."""

import pytest

from src.commerce.client import BulkEditSession, BulkSaveError, EditableRow

PRODUCTS = [
    {
        "id": "p1",
        "product_name": "Green Tea",
        "category": {"id": "cat-bev", "name": "Beverages"},
        "brand": {"id": "b1", "name": "Leafy"},
        "price": 120,
        "disc_price": 99,
        "sku": "TEA-01",
        "small_description": "Loose leaf",
        "stock": 10,
        "publish": True,
    },
    {
        "id": "p2",
        "product_name": "Basmati Rice",
        "category_id": "cat-grocery",
        "price": 499,
        "item_code": "RICE-5",
        "description": "Aged rice",
        "stock": "Unlimited",
    },
    {"id": "p3", "product_name": "Sea Salt", "category_id": "cat-grocery", "price": 20},
]

CATEGORY_NAMES = {"cat-bev": "Beverages", "cat-grocery": "Grocery"}


@pytest.fixture
def bulk() -> BulkEditSession:
    return BulkEditSession(PRODUCTS, CATEGORY_NAMES)


class Recorder:
    def __init__(self, fail_for: set[str] | None = None):
        self.sent: dict[str, dict] = {}
        self.fail_for = fail_for or set()

    async def __call__(self, product_id, payload):
        self.sent[product_id] = payload
        if product_id in self.fail_for:
            raise RuntimeError("server said no")
        return payload


class TestEditableRow:
    def test_from_product_fallbacks(self, bulk):
        tea = bulk.row("p1")
        assert tea.category_id == "cat-bev"
        assert tea.brand_id == "b1"
        assert tea.brand == "Leafy"
        assert tea.offer_price == 99
        assert tea.item_code == "TEA-01"
        assert tea.description == "Loose leaf"

        rice = bulk.row("p2")
        assert rice.item_code == "RICE-5"
        assert rice.description == "Aged rice"
        assert rice.stock == "Unlimited"
        assert rice.brand == "-"

        salt = bulk.row("p3")
        assert salt.stock == 0
        assert salt.low_stock_quantity == 5

    def test_rows_start_unchanged(self, bulk):
        assert not bulk.has_changes
        assert bulk.changed_rows() == []

    def test_setting_a_field_marks_row_changed(self):
        row = EditableRow(id="x", product_name="Thing")
        row.price = 12
        assert row.is_changed

    def test_update_payload_maps_field_names(self, bulk):
        payload = bulk.row("p1").to_update_payload()

        assert payload["disc_price"] == 99
        assert payload["sku"] == payload["item_code"] == "TEA-01"
        assert payload["small_description"] == payload["description"] == "Loose leaf"
        assert "is_changed" not in payload
        assert "brand" not in payload


class TestBulkEditSession:
    def test_edit_validates_values(self, bulk):
        with pytest.raises(ValueError):
            bulk.edit("p1", "stock", -3)

    def test_edit_rejects_read_only_fields(self, bulk):
        with pytest.raises(ValueError):
            bulk.edit("p1", "brand", "Other")

    def test_filter_by_name_and_category(self, bulk):
        assert [r.id for r in bulk.filter(search="RICE")] == ["p2"]
        assert [r.id for r in bulk.filter(category_search="groc")] == ["p2", "p3"]
        assert [r.id for r in bulk.filter(search="salt", category_search="bev")] == []
        assert len(bulk.filter()) == 3

    async def test_save_without_changes_sends_nothing(self, bulk):
        send = Recorder()

        assert await bulk.save(send) == 0
        assert send.sent == {}

    async def test_save_sends_only_changed_rows(self, bulk):
        bulk.edit("p1", "price", 110)
        bulk.edit("p3", "publish", True)
        send = Recorder()

        assert await bulk.save(send) == 2
        assert set(send.sent) == {"p1", "p3"}
        assert send.sent["p1"]["price"] == 110
        assert not bulk.has_changes

    async def test_failed_save_keeps_every_change_flag(self, bulk):
        bulk.edit("p1", "price", 110)
        bulk.edit("p2", "stock", 4)
        send = Recorder(fail_for={"p2"})

        with pytest.raises(BulkSaveError) as exc_info:
            await bulk.save(send)

        assert exc_info.value.failed_ids == ["p2"]
        assert set(send.sent) == {"p1", "p2"}
        assert {row.id for row in bulk.changed_rows()} == {"p1", "p2"}

    async def test_retry_after_failure_resends(self, bulk):
        bulk.edit("p2", "stock", 4)
        with pytest.raises(BulkSaveError):
            await bulk.save(Recorder(fail_for={"p2"}))

        send = Recorder()
        assert await bulk.save(send) == 1
        assert send.sent["p2"]["stock"] == 4
