"""Several open bills at one till; the cashier switches between them."""

from enum import StrEnum

from .cart import Cart, PosError


class PaymentMethod(StrEnum):
    CASH = "Cash"
    CARD = "Card"
    UPI = "UPI"
    CREDIT = "Credit"


class Bill:
    def __init__(self, bill_id: int) -> None:
        self.id = bill_id
        self.cart = Cart()
        self.payment_method = PaymentMethod.CASH
        self.customer_id: str | None = None

    @property
    def label(self) -> str:
        return f"Bill {self.id}"


class BillBook:
    """Open bills; exactly one is active and at least one is always open."""

    def __init__(self) -> None:
        self._bills: dict[int, Bill] = {}
        self._next_id = 1
        self.active_id = self.open().id

    @property
    def bills(self) -> list[Bill]:
        return list(self._bills.values())

    @property
    def active(self) -> Bill:
        return self._bills[self.active_id]

    def open(self) -> Bill:
        """Open a new empty bill and make it active."""
        bill = Bill(self._next_id)
        self._next_id += 1
        self._bills[bill.id] = bill
        self.active_id = bill.id
        return bill

    def switch(self, bill_id: int) -> Bill:
        if bill_id not in self._bills:
            raise PosError(f"Bill {bill_id} is not open")
        self.active_id = bill_id
        return self._bills[bill_id]

    def close(self, bill_id: int) -> Bill:
        """Close a bill and return the one that is active afterwards."""
        if bill_id not in self._bills:
            raise PosError(f"Bill {bill_id} is not open")
        del self._bills[bill_id]
        if not self._bills:
            return self.open()
        if self.active_id == bill_id:
            self.active_id = next(reversed(self._bills))
        return self.active
