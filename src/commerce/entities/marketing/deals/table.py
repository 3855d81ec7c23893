"""DealsConfig database table model."""

from datetime import datetime

from sqlalchemy import JSON, Column
from sqlmodel import Field

from src.commerce.entities.core._base import EntityTable


class DealsConfigTable(EntityTable, table=True):
    """Single-row table holding the storefront deals configuration."""

    __tablename__ = "deals_config"

    flash_deal_target_date: datetime
    flash_deal_image: str = ""
    featured_deal_product_ids: list[str] = Field(
        default_factory=list, sa_column=Column(JSON)
    )
    deal_of_the_day_product_ids: list[str] = Field(
        default_factory=list, sa_column=Column(JSON)
    )
