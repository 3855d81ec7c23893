"""Customer credit ledger ("khata") kept at the till."""

from datetime import datetime
from enum import StrEnum

from pydantic import BaseModel, Field

from src.commerce.entities.core._base import utcnow

from .cart import PosError


class LedgerEntryType(StrEnum):
    CREDIT = "CREDIT"
    PAYMENT = "PAYMENT"


class LedgerEntry(BaseModel):
    type: LedgerEntryType
    amount: float = Field(gt=0)
    note: str = ""
    mode: str | None = None
    at: datetime = Field(default_factory=utcnow)


class CustomerLedger:
    def __init__(self, customer_id: str, name: str = "") -> None:
        self.customer_id = customer_id
        self.name = name
        self._entries: list[LedgerEntry] = []

    def _record(self, entry_type: LedgerEntryType, amount: float, **fields) -> LedgerEntry:
        if amount <= 0:
            raise PosError("Enter a valid amount")
        entry = LedgerEntry(type=entry_type, amount=amount, **fields)
        self._entries.append(entry)
        return entry

    def add_credit(
        self, amount: float, note: str = "Manual Credit", at: datetime | None = None
    ) -> LedgerEntry:
        return self._record(LedgerEntryType.CREDIT, amount, note=note, at=at or utcnow())

    def add_payment(
        self, amount: float, mode: str = "Cash", note: str = "", at: datetime | None = None
    ) -> LedgerEntry:
        return self._record(
            LedgerEntryType.PAYMENT, amount, mode=mode, note=note, at=at or utcnow()
        )

    @property
    def total_credit(self) -> float:
        return sum(e.amount for e in self._entries if e.type == LedgerEntryType.CREDIT)

    @property
    def total_paid(self) -> float:
        return sum(e.amount for e in self._entries if e.type == LedgerEntryType.PAYMENT)

    @property
    def balance(self) -> float:
        """Amount still to collect; negative when the customer paid in advance."""
        return self.total_credit - self.total_paid

    def history(self) -> list[LedgerEntry]:
        """Entries newest first; entries at the same instant keep reverse entry order."""
        indexed = list(enumerate(self._entries))
        indexed.sort(key=lambda pair: (pair[1].at, pair[0]), reverse=True)
        return [entry for _, entry in indexed]
