"""Banner database table model."""

from sqlmodel import Field

from src.commerce.entities.core._base import EntityTable


class BannerTable(EntityTable, table=True):
    __tablename__ = "banners"

    position: str = Field(index=True)
    resource_type: str = "None"
    resource_id: str | None = None
    resource_name: str | None = None
    image_url: str
    is_active: bool = Field(default=True, index=True)
    category_name: str | None = None
    title: str | None = None
    subtitle: str | None = None
