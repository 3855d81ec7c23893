"""DealsConfig data access."""

from datetime import timedelta

from loguru import logger
from sqlmodel import col, select

from src.commerce.entities.core._base import utcnow
from src.commerce.entities.core.repository import EntityRepository

from .entity import DealsConfig, DealsConfigUpdate
from .table import DealsConfigTable


class DealsConfigRepository(EntityRepository[DealsConfig, DealsConfigTable]):
    entity_type = DealsConfig
    table_type = DealsConfigTable
    resource_name = "Deals config"

    def get_current(self) -> DealsConfig | None:
        statement = select(DealsConfigTable).order_by(col(DealsConfigTable.created_at))
        row = self._session.exec(statement).first()
        return self.to_entity(row) if row is not None else None

    def get_or_create(self, default_hours: int = 24) -> DealsConfig:
        current = self.get_current()
        if current is not None:
            return current
        logger.info("Creating default deals config ({}h flash deal)", default_hours)
        return self.create(
            DealsConfig(flash_deal_target_date=utcnow() + timedelta(hours=default_hours))
        )

    def apply(self, update: DealsConfigUpdate, default_hours: int = 24) -> DealsConfig:
        """Merge the fields present in ``update`` into the stored config."""
        current = self.get_or_create(default_hours)
        return self.patch(current.id, update.model_dump(exclude_unset=True))
