"""Entity: Category."""

from typing import Any

from pydantic import BaseModel, Field

from src.commerce.entities.core._base import Entity


class Category(Entity):
    """Product category; subcategories point at their parent."""

    name: str = Field(min_length=1, description="Display name")
    parent_id: str | None = Field(default=None, description="Parent category id")

    @property
    def is_subcategory(self) -> bool:
        return self.parent_id is not None

    def __eq__(self, other: Any) -> bool:
        """Compare categories by business attributes, ignoring timestamps."""
        if not isinstance(other, Category):
            return False
        return (
            self.id == other.id
            and self.name == other.name
            and self.parent_id == other.parent_id
        )

    def __hash__(self) -> int:
        return hash((self.id, self.name, self.parent_id))


class CategoryUpdate(BaseModel):
    name: str | None = Field(default=None, min_length=1)
    parent_id: str | None = None
