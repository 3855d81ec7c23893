"""Unit tests for return and replacement requests."""

import pytest

from src.commerce.core.errors import ConflictError, InvalidRequestError
from src.commerce.entities.service_request import (
    PickupStatus,
    RequestKind,
    RequestStatus,
    ServiceRequest,
)


def _request(kind: RequestKind = RequestKind.RETURN, **overrides) -> ServiceRequest:
    data = {
        "kind": kind,
        "order_id": "ORD-1001",
        "customer_id": "customer-1",
        "customer_name": "Asha Verma",
        "product_name": "Cotton Shirt",
        "reason": "Wrong size",
    }
    data.update(overrides)
    return ServiceRequest(**data)


class TestTransitions:
    def test_new_requests_are_pending(self):
        request = _request()
        assert request.status == RequestStatus.PENDING
        assert request.pickup_status is None

    def test_approve_return_assigns_pickup(self):
        approved = _request().approve("  Ravi ")

        assert approved.status == RequestStatus.APPROVED
        assert approved.delivery_assignee == "Ravi"
        assert approved.pickup_status == PickupStatus.PENDING_PICKUP

    def test_approve_return_without_assignee(self):
        with pytest.raises(InvalidRequestError):
            _request().approve("   ")

    def test_approve_replacement_without_assignee(self):
        approved = _request(RequestKind.REPLACEMENT).approve()
        assert approved.status == RequestStatus.APPROVED
        assert approved.delivery_assignee is None

    def test_reject_requires_reason(self):
        with pytest.raises(InvalidRequestError):
            _request().reject(" ")

        rejected = _request().reject("Used item")
        assert rejected.status == RequestStatus.REJECTED
        assert rejected.rejection_reason == "Used item"

    def test_only_pending_requests_can_be_decided(self):
        approved = _request().approve("Ravi")
        with pytest.raises(ConflictError):
            approved.approve("Ravi")
        with pytest.raises(ConflictError):
            approved.reject("Too late")

        rejected = _request().reject("No")
        with pytest.raises(ConflictError):
            rejected.approve("Ravi")

    def test_pickup_requires_approval(self):
        with pytest.raises(ConflictError):
            _request().mark_picked_up()

        picked = _request().approve("Ravi").mark_picked_up()
        assert picked.pickup_status == PickupStatus.PICKED_UP
        with pytest.raises(ConflictError):
            picked.mark_picked_up()


class TestServiceRequestRepository:
    def test_search_by_kind_and_term(self, service_requests):
        shirt = service_requests.create(_request())
        service_requests.create(_request(product_name="Kettle", customer_name="Vikram"))
        service_requests.create(_request(RequestKind.REPLACEMENT, order_id="ORD-2002"))

        returns = service_requests.search(RequestKind.RETURN)
        assert len(returns) == 2

        assert [r.id for r in service_requests.search(RequestKind.RETURN, "cotton")] == [shirt.id]
        assert len(service_requests.search(RequestKind.RETURN, "VIKRAM")) == 1
        assert len(service_requests.search(RequestKind.REPLACEMENT, "ord-2002")) == 1
        assert service_requests.search(RequestKind.REPLACEMENT, "kettle") == []

    def test_search_by_id(self, service_requests):
        created = service_requests.create(_request())
        assert service_requests.search(RequestKind.RETURN, created.id[:8])[0].id == created.id

    def test_awaiting_delivery_lists_approved_only(self, service_requests):
        pending = service_requests.create(_request())
        approved = service_requests.update(service_requests.create(_request()).approve("Ravi"))

        waiting = service_requests.awaiting_delivery(RequestKind.RETURN)
        assert [r.id for r in waiting] == [approved.id]
        assert pending.id not in {r.id for r in waiting}

    def test_status_filter(self, service_requests):
        service_requests.create(_request())
        service_requests.update(service_requests.create(_request()).reject("No receipt"))

        rejected = service_requests.search(RequestKind.RETURN, status=RequestStatus.REJECTED)
        assert len(rejected) == 1
        assert rejected[0].rejection_reason == "No receipt"
