"""Category database table model."""

from sqlmodel import Field

from src.commerce.entities.core._base import EntityTable


class CategoryTable(EntityTable, table=True):
    """Database persistence model for categories."""

    __tablename__ = "categories"

    name: str = Field(index=True)
    parent_id: str | None = Field(default=None, index=True)
