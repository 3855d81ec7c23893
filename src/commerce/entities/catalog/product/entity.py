"""Entity: Product."""

import uuid
from typing import Annotated, Any, Literal

from pydantic import BaseModel, BeforeValidator, Field, NonNegativeInt

from src.commerce.entities.core._base import Entity

UNLIMITED = "Unlimited"


def _normalize_stock(value: Any) -> Any:
    if isinstance(value, str) and value.strip().lower() == UNLIMITED.lower():
        return UNLIMITED
    return value


StockLevel = Annotated[
    NonNegativeInt | Literal["Unlimited"], BeforeValidator(_normalize_stock)
]


class Variation(BaseModel):
    """One sellable option of a product (size, colour, pack...)."""

    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    name: str = Field(default="", description="Option name, e.g. 'Size'")
    value: str = Field(default="", description="Option value, e.g. 'XL'")
    title: str | None = None
    # None means the variation shares the product-level stock
    stock: StockLevel | None = None
    price: float | None = Field(default=None, ge=0)

    @property
    def label(self) -> str:
        return f"{self.name}: {self.value}"


class Product(Entity):
    """Catalog product as sold by a seller.

    ``stock`` is either a non-negative count or the ``"Unlimited"`` sentinel.
    When ``variations`` is non-empty, each variation carries its own stock and
    the product-level stock is only a fallback.
    """

    product_name: str = Field(min_length=1)
    category_id: str | None = None
    subcategory_id: str | None = None
    sub_sub_category: str = ""
    brand_id: str | None = None
    seller_id: str | None = None
    seller_name: str | None = None

    price: float = Field(ge=0)
    compare_at_price: float = Field(default=0, ge=0)
    disc_price: float = Field(default=0, ge=0, description="Offer price")
    purchase_price: float = Field(default=0, ge=0)
    tax: str = ""

    stock: StockLevel = 0
    low_stock_quantity: int = Field(default=5, ge=0)
    publish: bool = False

    main_image: str = ""
    gallery_images: list[str] = Field(default_factory=list)

    sku: str = ""
    item_code: str = ""
    rack_number: str = ""
    barcode: str = ""
    hsn_code: str = ""
    pack: str = Field(default="", description="Unit of sale")
    delivery_time: str = ""
    small_description: str = ""
    description: str = ""

    variations: list[Variation] = Field(default_factory=list)

    @property
    def status(self) -> str:
        return "Published" if self.publish else "Unpublished"

    @property
    def display_image(self) -> str:
        if self.main_image:
            return self.main_image
        return self.gallery_images[0] if self.gallery_images else ""

    def find_variation(self, variation_id: str) -> Variation | None:
        for variation in self.variations:
            if variation.id == variation_id:
                return variation
        return None

    def __eq__(self, other: Any) -> bool:
        """Compare products by business attributes, ignoring timestamps."""
        if not isinstance(other, Product):
            return False
        return self.model_dump(exclude={"created_at", "updated_at"}) == other.model_dump(
            exclude={"created_at", "updated_at"}
        )

    def __hash__(self) -> int:
        return hash((self.id, self.product_name, self.seller_id))


class ProductUpdate(BaseModel):
    """Partial product update; only fields that were sent are applied."""

    product_name: str | None = Field(default=None, min_length=1)
    category_id: str | None = None
    subcategory_id: str | None = None
    sub_sub_category: str | None = None
    brand_id: str | None = None
    price: float | None = Field(default=None, ge=0)
    compare_at_price: float | None = Field(default=None, ge=0)
    disc_price: float | None = Field(default=None, ge=0)
    purchase_price: float | None = Field(default=None, ge=0)
    tax: str | None = None
    stock: StockLevel | None = None
    low_stock_quantity: int | None = Field(default=None, ge=0)
    publish: bool | None = None
    main_image: str | None = None
    gallery_images: list[str] | None = None
    sku: str | None = None
    item_code: str | None = None
    rack_number: str | None = None
    barcode: str | None = None
    hsn_code: str | None = None
    pack: str | None = None
    delivery_time: str | None = None
    small_description: str | None = None
    description: str | None = None
    variations: list[Variation] | None = None

    def changes(self) -> dict[str, Any]:
        return self.model_dump(exclude_unset=True)
