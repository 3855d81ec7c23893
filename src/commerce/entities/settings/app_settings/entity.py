"""Entity: AppSettings.

Store-wide settings edited from the admin panel. There is a single record.
"""

from pydantic import BaseModel, Field

from src.commerce.entities.core._base import Entity


class BarcodeSettings(BaseModel):
    """Label printer layout; sizes are millimetres for the label, pixels for text."""

    width: int = Field(default=38, gt=0)
    height: int = Field(default=25, gt=0)
    font_size: int = Field(default=10, gt=0)
    barcode_height: int = Field(default=40, gt=0)
    product_name_size: int = Field(default=10, gt=0)
    show_price: bool = True
    show_name: bool = True


class BarcodeSettingsUpdate(BaseModel):
    width: int | None = Field(default=None, gt=0)
    height: int | None = Field(default=None, gt=0)
    font_size: int | None = Field(default=None, gt=0)
    barcode_height: int | None = Field(default=None, gt=0)
    product_name_size: int | None = Field(default=None, gt=0)
    show_price: bool | None = None
    show_name: bool | None = None


class DisplayField(BaseModel):
    id: str
    label: str
    description: str = ""
    is_enabled: bool = True
    can_delete: bool = False


class DisplaySection(BaseModel):
    id: str
    title: str
    description: str = ""
    fields: list[DisplayField] = Field(default_factory=list)


def default_display_sections() -> list[DisplaySection]:
    """Product page sections shown until an admin saves their own."""
    return [
        DisplaySection(
            id="basic",
            title="Basic Details",
            description="Control what appears on your product page.",
            fields=[
                DisplayField(id="category", label="Category", description="Product Category Information"),
                DisplayField(id="brand", label="Brand", description="Product Brand Information"),
                DisplayField(
                    id="summary",
                    label="Summary",
                    description="2-3 key points, e.g. 4 star frost free refrigerator",
                ),
                DisplayField(id="description", label="Description", description="Detailed product description"),
                DisplayField(
                    id="video",
                    label="Product Video",
                    description="Specify product youtube video link",
                    is_enabled=False,
                ),
            ],
        ),
        DisplaySection(
            id="pricing",
            title="Pricing & Tax",
            fields=[
                DisplayField(id="tax", label="Tax", description="Tax related info"),
                DisplayField(
                    id="purchase_price",
                    label="Purchase Price",
                    description="Purchase price of goods (visible only to you)",
                ),
            ],
        ),
        DisplaySection(
            id="variants",
            title="Variant Fields",
            description="Add variants for products having more than one option",
            fields=[
                DisplayField(id="size", label="Size", description="Product variant", can_delete=True),
                DisplayField(id="color", label="Color", description="Product variant", can_delete=True),
                DisplayField(
                    id="online_offer_price",
                    label="Online Offer Price",
                    description="Product variant",
                    is_enabled=False,
                    can_delete=True,
                ),
            ],
        ),
    ]


class AppSettings(Entity):
    gemini_api_key: str | None = None
    google_cx_id: str | None = None
    barcode: BarcodeSettings = Field(default_factory=BarcodeSettings)
    product_display: list[DisplaySection] = Field(default_factory=default_display_sections)
