"""Admin review of return and replacement requests."""

from fastapi import APIRouter, Depends
from loguru import logger
from pydantic import BaseModel
from sqlmodel import Session

from src.commerce.api.http.deps import get_db_session, get_service_request_repository
from src.commerce.api.http.schemas import ok, ok_list
from src.commerce.entities.service_request import (
    RequestKind,
    RequestStatus,
    ServiceRequestRepository,
)

router = APIRouter(prefix="/service-requests")


class ApproveRequest(BaseModel):
    delivery_assignee: str | None = None


class RejectRequest(BaseModel):
    reason: str


@router.get("")
def list_requests(
    kind: RequestKind = RequestKind.RETURN,
    search: str | None = None,
    status: RequestStatus | None = None,
    requests: ServiceRequestRepository = Depends(get_service_request_repository),
) -> dict:
    return ok_list(requests.search(kind, search=search, status=status))


@router.post("/{request_id}/approve")
def approve_request(
    request_id: str,
    body: ApproveRequest,
    session: Session = Depends(get_db_session),
    requests: ServiceRequestRepository = Depends(get_service_request_repository),
) -> dict:
    approved = requests.require(request_id).approve(body.delivery_assignee)
    saved = requests.update(approved)
    session.commit()
    logger.info("Service request {} approved", request_id)
    return ok(saved, "Request approved")


@router.post("/{request_id}/reject")
def reject_request(
    request_id: str,
    body: RejectRequest,
    session: Session = Depends(get_db_session),
    requests: ServiceRequestRepository = Depends(get_service_request_repository),
) -> dict:
    rejected = requests.require(request_id).reject(body.reason)
    saved = requests.update(rejected)
    session.commit()
    logger.info("Service request {} rejected", request_id)
    return ok(saved, "Request rejected")
