"""Entity: ServiceRequest.

A customer asks to return or replace an ordered item. Admins approve or
reject pending requests; approved requests are then collected by a
delivery partner.
"""

from enum import StrEnum

from pydantic import BaseModel, Field

from src.commerce.core.errors import ConflictError, InvalidRequestError
from src.commerce.entities.core._base import Entity


class RequestKind(StrEnum):
    RETURN = "return"
    REPLACEMENT = "replacement"


class RequestStatus(StrEnum):
    PENDING = "Pending"
    APPROVED = "Approved"
    REJECTED = "Rejected"


class PickupStatus(StrEnum):
    PENDING_PICKUP = "Pending Pickup"
    PICKED_UP = "Picked Up"


class ServiceRequestCreate(BaseModel):
    """Fields a customer submits when opening a request."""

    kind: RequestKind
    order_id: str = Field(min_length=1)
    product_name: str = Field(min_length=1)
    product_image: str = ""
    quantity: int = Field(default=1, ge=1)
    reason: str = Field(min_length=1)
    address: str = ""
    customer_name: str = ""


class ServiceRequest(Entity):
    kind: RequestKind
    order_id: str
    customer_id: str
    customer_name: str = ""
    product_name: str
    product_image: str = ""
    quantity: int = Field(default=1, ge=1)
    reason: str
    address: str = ""
    status: RequestStatus = RequestStatus.PENDING
    rejection_reason: str | None = None
    delivery_assignee: str | None = None
    pickup_status: PickupStatus | None = None

    def _require_pending(self, action: str) -> None:
        if self.status != RequestStatus.PENDING:
            raise ConflictError(
                f"Cannot {action} a request that is already {self.status.value}"
            )

    def approve(self, delivery_assignee: str | None = None) -> "ServiceRequest":
        self._require_pending("approve")
        assignee = (delivery_assignee or "").strip() or None
        if self.kind == RequestKind.RETURN and assignee is None:
            raise InvalidRequestError("A delivery assignee is required to approve a return")
        return self.model_copy(
            update={
                "status": RequestStatus.APPROVED,
                "delivery_assignee": assignee,
                "pickup_status": PickupStatus.PENDING_PICKUP,
            }
        )

    def reject(self, reason: str) -> "ServiceRequest":
        self._require_pending("reject")
        if not reason or not reason.strip():
            raise InvalidRequestError("A rejection reason is required")
        return self.model_copy(
            update={"status": RequestStatus.REJECTED, "rejection_reason": reason.strip()}
        )

    def mark_picked_up(self) -> "ServiceRequest":
        if (
            self.status != RequestStatus.APPROVED
            or self.pickup_status != PickupStatus.PENDING_PICKUP
        ):
            raise ConflictError("Only approved requests awaiting pickup can be picked up")
        return self.model_copy(update={"pickup_status": PickupStatus.PICKED_UP})
