"""Point-of-sale state held in memory for one till session."""

from .bills import Bill, BillBook, PaymentMethod
from .cart import Cart, CartItem, PosError
from .ledger import CustomerLedger, LedgerEntry, LedgerEntryType

__all__ = [
    "Bill",
    "BillBook",
    "Cart",
    "CartItem",
    "CustomerLedger",
    "LedgerEntry",
    "LedgerEntryType",
    "PaymentMethod",
    "PosError",
]
