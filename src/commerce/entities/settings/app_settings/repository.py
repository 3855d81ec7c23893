"""AppSettings data access."""

from typing import Any

from loguru import logger
from sqlmodel import col, select

from src.commerce.entities.core.repository import EntityRepository

from .entity import AppSettings, BarcodeSettingsUpdate, DisplaySection
from .table import AppSettingsTable


class AppSettingsRepository(EntityRepository[AppSettings, AppSettingsTable]):
    entity_type = AppSettings
    table_type = AppSettingsTable
    resource_name = "Settings"

    def to_entity(self, row: AppSettingsTable) -> AppSettings:
        data = row.model_dump()
        # An empty list means nothing was saved yet
        if not data.get("product_display"):
            data.pop("product_display", None)
        data["barcode"] = data.get("barcode") or {}
        return AppSettings.model_validate(data)

    def get_or_create(self) -> AppSettings:
        row = self._session.exec(
            select(AppSettingsTable).order_by(col(AppSettingsTable.created_at))
        ).first()
        if row is not None:
            return self.to_entity(row)
        logger.info("Creating default application settings")
        return self.create(AppSettings())

    def update_barcode(self, update: BarcodeSettingsUpdate) -> AppSettings:
        current = self.get_or_create()
        barcode = current.barcode.model_copy(update=update.model_dump(exclude_unset=True))
        return self.patch(current.id, {"barcode": barcode.model_dump()})

    def update_product_display(self, sections: list[DisplaySection]) -> AppSettings:
        current = self.get_or_create()
        return self.patch(
            current.id, {"product_display": [section.model_dump() for section in sections]}
        )

    def update_image_search(
        self, gemini_api_key: str | None, google_cx_id: str | None
    ) -> AppSettings:
        current = self.get_or_create()
        changes: dict[str, Any] = {}
        if gemini_api_key is not None:
            changes["gemini_api_key"] = gemini_api_key.strip() or None
        if google_cx_id is not None:
            changes["google_cx_id"] = google_cx_id.strip() or None
        return self.patch(current.id, changes)
