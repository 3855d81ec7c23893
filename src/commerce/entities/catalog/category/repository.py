"""Category data access."""

from sqlmodel import col, select

from src.commerce.entities.core.repository import EntityRepository

from .entity import Category
from .table import CategoryTable


class CategoryRepository(EntityRepository[Category, CategoryTable]):
    entity_type = Category
    table_type = CategoryTable
    resource_name = "Category"

    def list_children(self, parent_id: str) -> list[Category]:
        statement = (
            select(CategoryTable)
            .where(CategoryTable.parent_id == parent_id)
            .order_by(col(CategoryTable.name))
        )
        return [self.to_entity(row) for row in self._session.exec(statement).all()]

    def names_by_id(self) -> dict[str, str]:
        return {category.id: category.name for category in self.list_all()}
