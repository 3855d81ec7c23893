"""Delivery partner API: pickups for approved returns and replacements."""

from fastapi import APIRouter, Depends
from loguru import logger
from sqlmodel import Session

from src.commerce.api.http.deps import (
    get_db_session,
    get_service_request_repository,
    require_delivery,
)
from src.commerce.api.http.schemas import ok, ok_list
from src.commerce.core.models.principal import Principal
from src.commerce.entities.service_request import RequestKind, ServiceRequestRepository

router = APIRouter(prefix="/delivery", tags=["delivery"])


@router.get("/return-orders")
def list_return_orders(
    kind: RequestKind = RequestKind.RETURN,
    _: Principal = Depends(require_delivery),
    requests: ServiceRequestRepository = Depends(get_service_request_repository),
) -> dict:
    return ok_list(requests.awaiting_delivery(kind))


@router.post("/return-orders/{request_id}/pickup")
def mark_picked_up(
    request_id: str,
    courier: Principal = Depends(require_delivery),
    session: Session = Depends(get_db_session),
    requests: ServiceRequestRepository = Depends(get_service_request_repository),
) -> dict:
    picked = requests.require(request_id).mark_picked_up()
    saved = requests.update(picked)
    session.commit()
    logger.info("Request {} picked up by {}", request_id, courier.subject)
    return ok(saved, "Marked as picked up")
