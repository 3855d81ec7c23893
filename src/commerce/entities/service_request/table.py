"""ServiceRequest database table model."""

from sqlmodel import Field

from src.commerce.entities.core._base import EntityTable


class ServiceRequestTable(EntityTable, table=True):
    __tablename__ = "service_requests"

    kind: str = Field(index=True)
    order_id: str = Field(index=True)
    customer_id: str = Field(index=True)
    customer_name: str = ""
    product_name: str
    product_image: str = ""
    quantity: int = 1
    reason: str
    address: str = ""
    status: str = Field(default="Pending", index=True)
    rejection_reason: str | None = None
    delivery_assignee: str | None = None
    pickup_status: str | None = None
