"""Entity package: ServiceRequest (returns and replacements)."""

from .entity import (
    PickupStatus,
    RequestKind,
    RequestStatus,
    ServiceRequest,
    ServiceRequestCreate,
)
from .repository import ServiceRequestRepository
from .table import ServiceRequestTable

__all__ = [
    "PickupStatus",
    "RequestKind",
    "RequestStatus",
    "ServiceRequest",
    "ServiceRequestCreate",
    "ServiceRequestRepository",
    "ServiceRequestTable",
]
