"""Banner data access."""

from typing import Any

from sqlmodel import col, select

from src.commerce.entities.core.repository import EntityRepository

from .entity import Banner, BannerPosition
from .table import BannerTable


class BannerRepository(EntityRepository[Banner, BannerTable]):
    entity_type = Banner
    table_type = BannerTable
    resource_name = "Banner"

    def to_row_data(self, entity: Banner) -> dict[str, Any]:
        # ``image`` is derived from image_url and has no column
        return entity.model_dump(mode="python", exclude={"image"})

    def active_for_position(self, position: BannerPosition) -> list[Banner]:
        statement = (
            select(BannerTable)
            .where(BannerTable.position == position.value)
            .where(col(BannerTable.is_active).is_(True))
            .order_by(col(BannerTable.created_at))
        )
        return [self.to_entity(row) for row in self._session.exec(statement).all()]
