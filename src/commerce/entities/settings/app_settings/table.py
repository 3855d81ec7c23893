"""AppSettings database table model."""

from sqlalchemy import JSON, Column
from sqlmodel import Field

from src.commerce.entities.core._base import EntityTable


class AppSettingsTable(EntityTable, table=True):
    __tablename__ = "app_settings"

    gemini_api_key: str | None = None
    google_cx_id: str | None = None
    # Stored partially; missing keys fall back to the entity defaults
    barcode: dict = Field(default_factory=dict, sa_column=Column(JSON))
    product_display: list[dict] = Field(default_factory=list, sa_column=Column(JSON))
