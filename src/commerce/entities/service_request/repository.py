"""ServiceRequest data access."""

from sqlalchemy import func, or_
from sqlmodel import col, select

from src.commerce.entities.core.repository import EntityRepository

from .entity import RequestKind, RequestStatus, ServiceRequest
from .table import ServiceRequestTable


class ServiceRequestRepository(EntityRepository[ServiceRequest, ServiceRequestTable]):
    entity_type = ServiceRequest
    table_type = ServiceRequestTable
    resource_name = "Request"

    def search(
        self,
        kind: RequestKind,
        search: str | None = None,
        status: RequestStatus | None = None,
    ) -> list[ServiceRequest]:
        """Requests of one kind, newest first, optionally filtered by a free-text term."""
        statement = select(ServiceRequestTable).where(
            ServiceRequestTable.kind == kind.value
        )
        if status is not None:
            statement = statement.where(ServiceRequestTable.status == status.value)
        if search:
            pattern = f"%{search.lower()}%"
            statement = statement.where(
                or_(
                    func.lower(col(ServiceRequestTable.id)).like(pattern),
                    func.lower(col(ServiceRequestTable.order_id)).like(pattern),
                    func.lower(col(ServiceRequestTable.customer_name)).like(pattern),
                    func.lower(col(ServiceRequestTable.product_name)).like(pattern),
                )
            )
        statement = statement.order_by(col(ServiceRequestTable.created_at).desc())
        return [self.to_entity(row) for row in self._session.exec(statement).all()]

    def awaiting_delivery(self, kind: RequestKind) -> list[ServiceRequest]:
        return self.search(kind, status=RequestStatus.APPROVED)
