"""Bulk edit: an editable mirror of many products saved in one batch.

Every row remembers whether it was touched. Saving sends one update per
touched row, all at once; untouched rows are never sent.
"""

from collections.abc import Iterable, Mapping
from typing import Any

from loguru import logger
from pydantic import BaseModel, ConfigDict, Field

from src.commerce.entities.catalog.product import StockLevel

from .dispatch import UpdateFn, dispatch_updates


def _ref_id(value: Any) -> str:
    """Category, subcategory and brand arrive either as ids or as embedded objects."""
    if isinstance(value, Mapping):
        return str(value.get("id") or value.get("_id") or "")
    if isinstance(value, str):
        return value
    return ""


class EditableRow(BaseModel):
    model_config = ConfigDict(validate_assignment=True)

    id: str
    product_name: str
    category_id: str = ""
    subcategory_id: str = ""
    sub_sub_category: str = ""
    brand_id: str = ""
    brand: str = Field(default="-", description="Brand display name; read-only")
    compare_at_price: float = 0
    price: float = 0
    offer_price: float = 0
    purchase_price: float = 0
    stock: StockLevel = 0
    publish: bool = False
    main_image: str = ""
    gallery_images: list[str] = Field(default_factory=list)
    item_code: str = ""
    rack_number: str = ""
    description: str = ""
    barcode: str = ""
    hsn_code: str = ""
    pack: str = ""
    delivery_time: str = ""
    low_stock_quantity: int = 5
    tax: str = ""
    is_changed: bool = False

    def __setattr__(self, name: str, value: Any) -> None:
        super().__setattr__(name, value)
        if name in EDITABLE_FIELDS:
            super().__setattr__("is_changed", True)

    @classmethod
    def from_product(cls, product: Mapping[str, Any]) -> "EditableRow":
        brand = product.get("brand")
        return cls(
            id=str(product.get("id") or product.get("_id")),
            product_name=product.get("product_name") or "",
            category_id=_ref_id(product.get("category_id") or product.get("category")),
            subcategory_id=_ref_id(product.get("subcategory_id") or product.get("subcategory")),
            sub_sub_category=product.get("sub_sub_category") or "",
            brand_id=_ref_id(product.get("brand_id") or brand),
            brand=brand.get("name", "-") if isinstance(brand, Mapping) else "-",
            compare_at_price=product.get("compare_at_price") or 0,
            price=product.get("price") or 0,
            offer_price=product.get("disc_price") or 0,
            purchase_price=product.get("purchase_price") or 0,
            stock=product.get("stock") or 0,
            publish=bool(product.get("publish")),
            main_image=product.get("main_image") or "",
            gallery_images=list(product.get("gallery_images") or []),
            item_code=product.get("item_code") or product.get("sku") or "",
            rack_number=product.get("rack_number") or "",
            description=product.get("small_description") or product.get("description") or "",
            barcode=product.get("barcode") or "",
            hsn_code=product.get("hsn_code") or "",
            pack=product.get("pack") or "",
            delivery_time=product.get("delivery_time") or "",
            low_stock_quantity=product.get("low_stock_quantity") or 5,
            tax=product.get("tax") or "",
        )

    def to_update_payload(self) -> dict[str, Any]:
        """Map the row back onto the product update fields."""
        return {
            "product_name": self.product_name,
            "category_id": self.category_id,
            "subcategory_id": self.subcategory_id,
            "sub_sub_category": self.sub_sub_category,
            "brand_id": self.brand_id,
            "compare_at_price": self.compare_at_price,
            "price": self.price,
            "disc_price": self.offer_price,
            "purchase_price": self.purchase_price,
            "stock": self.stock,
            "publish": self.publish,
            "main_image": self.main_image,
            "gallery_images": self.gallery_images,
            "sku": self.item_code,
            "item_code": self.item_code,
            "rack_number": self.rack_number,
            "small_description": self.description,
            "description": self.description,
            "barcode": self.barcode,
            "hsn_code": self.hsn_code,
            "pack": self.pack,
            "delivery_time": self.delivery_time,
            "low_stock_quantity": self.low_stock_quantity,
            "tax": self.tax,
        }


EDITABLE_FIELDS = frozenset(EditableRow.model_fields) - {"id", "brand", "is_changed"}


class BulkEditSession:
    """Editable rows for a set of products, independent of any other view of them."""

    def __init__(
        self,
        products: Iterable[Mapping[str, Any]],
        category_names: Mapping[str, str] | None = None,
    ):
        self.rows = [EditableRow.from_product(product) for product in products]
        self._by_id = {row.id: row for row in self.rows}
        self._category_names = dict(category_names or {})

    def row(self, product_id: str) -> EditableRow:
        return self._by_id[product_id]

    def edit(self, product_id: str, field: str, value: Any) -> EditableRow:
        if field not in EDITABLE_FIELDS:
            raise ValueError(f"Field '{field}' cannot be edited")
        row = self.row(product_id)
        setattr(row, field, value)
        return row

    def changed_rows(self) -> list[EditableRow]:
        return [row for row in self.rows if row.is_changed]

    @property
    def has_changes(self) -> bool:
        return any(row.is_changed for row in self.rows)

    def filter(self, search: str = "", category_search: str = "") -> list[EditableRow]:
        """Rows whose name and category name contain the given terms (case-insensitive)."""
        search = search.lower()
        category_search = category_search.lower()
        matches = []
        for row in self.rows:
            category_name = self._category_names.get(row.category_id, "")
            if search in row.product_name.lower() and category_search in category_name.lower():
                matches.append(row)
        return matches

    async def save(self, send: UpdateFn) -> int:
        """Send every changed row; returns how many were saved.

        On failure ``BulkSaveError`` propagates and every row keeps its
        ``is_changed`` flag, including rows whose own update went through.
        """
        changed = self.changed_rows()
        if not changed:
            logger.debug("Bulk edit save skipped: nothing changed")
            return 0

        await dispatch_updates([(row.id, row.to_update_payload()) for row in changed], send)
        for row in changed:
            row.is_changed = False
        return len(changed)
