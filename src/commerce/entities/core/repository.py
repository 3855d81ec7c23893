"""Shared data-access behaviour for entity repositories."""

from __future__ import annotations

from typing import Any, ClassVar, Generic, TypeVar

from pydantic import ValidationError
from sqlmodel import Session, col, select

from src.commerce.core.errors import InvalidRequestError, NotFoundError
from src.commerce.entities.core._base import Entity, EntityTable, utcnow

E = TypeVar("E", bound=Entity)
T = TypeVar("T", bound=EntityTable)

# Fields the repository owns; callers never overwrite them through update/patch
_PROTECTED_FIELDS = frozenset({"id", "created_at", "updated_at"})


class EntityRepository(Generic[E, T]):
    """Data-access layer mapping one domain entity onto one table."""

    entity_type: ClassVar[type[Entity]]
    table_type: ClassVar[type[EntityTable]]
    resource_name: ClassVar[str] = "Record"

    def __init__(self, session: Session) -> None:
        self._session = session

    # --- mapping -------------------------------------------------------
    def to_entity(self, row: T) -> E:
        return self.entity_type.model_validate(row, from_attributes=True)  # type: ignore[return-value]

    def to_row_data(self, entity: E) -> dict[str, Any]:
        return entity.model_dump(mode="python")

    # --- CRUD ----------------------------------------------------------
    def create(self, entity: E) -> E:
        row = self.table_type(**self.to_row_data(entity))
        self._session.add(row)
        self._session.flush()
        self._session.refresh(row)
        return self.to_entity(row)  # type: ignore[arg-type]

    def get(self, entity_id: str) -> E | None:
        row = self._session.get(self.table_type, entity_id)
        if row is None:
            return None
        return self.to_entity(row)  # type: ignore[arg-type]

    def require(self, entity_id: str) -> E:
        entity = self.get(entity_id)
        if entity is None:
            raise NotFoundError(self.resource_name, entity_id)
        return entity

    def update(self, entity: E) -> E:
        row = self._session.get(self.table_type, entity.id)
        if row is None:
            raise NotFoundError(self.resource_name, entity.id)
        for field, value in self.to_row_data(entity).items():
            if field in _PROTECTED_FIELDS:
                continue
            setattr(row, field, value)
        row.updated_at = utcnow()
        self._session.add(row)
        self._session.flush()
        self._session.refresh(row)
        return self.to_entity(row)  # type: ignore[arg-type]

    def patch(self, entity_id: str, changes: dict[str, Any]) -> E:
        """Apply a partial update; unknown or protected keys are ignored."""
        current = self.require(entity_id)
        data = current.model_dump(mode="python")
        for field, value in changes.items():
            if field in _PROTECTED_FIELDS or field not in data:
                continue
            data[field] = value
        try:
            merged = self.entity_type.model_validate(data)
        except ValidationError as exc:
            raise InvalidRequestError(
                f"Invalid {self.resource_name.lower()} update: {exc.error_count()} error(s)"
            ) from exc
        return self.update(merged)  # type: ignore[arg-type]

    def delete(self, entity_id: str) -> bool:
        row = self._session.get(self.table_type, entity_id)
        if row is None:
            return False
        self._session.delete(row)
        self._session.flush()
        return True

    def list_all(self, newest_first: bool = False) -> list[E]:
        order = col(self.table_type.created_at)
        statement = select(self.table_type).order_by(
            order.desc() if newest_first else order.asc()
        )
        return [self.to_entity(row) for row in self._session.exec(statement).all()]  # type: ignore[arg-type]
