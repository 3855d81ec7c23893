"""Product database table model."""

from sqlalchemy import JSON, Column
from sqlmodel import Field

from src.commerce.entities.core._base import EntityTable


class ProductTable(EntityTable, table=True):
    """Database persistence model for products.

    The ``"Unlimited"`` stock sentinel is stored as ``unlimited_stock`` so
    that ``stock`` stays an integer column.
    """

    __tablename__ = "products"

    product_name: str = Field(index=True)
    category_id: str | None = Field(default=None, index=True)
    subcategory_id: str | None = Field(default=None, index=True)
    sub_sub_category: str = ""
    brand_id: str | None = None
    seller_id: str | None = Field(default=None, index=True)
    seller_name: str | None = None

    price: float = 0
    compare_at_price: float = 0
    disc_price: float = 0
    purchase_price: float = 0
    tax: str = ""

    stock: int = 0
    unlimited_stock: bool = False
    low_stock_quantity: int = 5
    publish: bool = Field(default=False, index=True)

    main_image: str = ""
    gallery_images: list[str] = Field(default_factory=list, sa_column=Column(JSON))

    sku: str = Field(default="", index=True)
    item_code: str = ""
    rack_number: str = ""
    barcode: str = ""
    hsn_code: str = ""
    pack: str = ""
    delivery_time: str = ""
    small_description: str = ""
    description: str = ""

    variations: list[dict] = Field(default_factory=list, sa_column=Column(JSON))
