"""POS cart."""

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, Field


class PosError(ValueError):
    """Invalid till operation (unknown item, non-positive amount...)."""


class CartItem(BaseModel):
    id: str
    name: str
    price: float = Field(ge=0)
    purchase_price: float = Field(default=0, ge=0)
    quantity: int = Field(default=1, ge=1)
    is_quick_add: bool = False

    @property
    def line_total(self) -> float:
        return self.price * self.quantity

    @property
    def line_margin(self) -> float:
        return (self.price - self.purchase_price) * self.quantity


class Cart:
    def __init__(self) -> None:
        self._items: dict[str, CartItem] = {}
        self._quick_counter = 0

    @property
    def items(self) -> list[CartItem]:
        return list(self._items.values())

    def __len__(self) -> int:
        return len(self._items)

    def _require(self, item_id: str) -> CartItem:
        try:
            return self._items[item_id]
        except KeyError:
            raise PosError(f"Item '{item_id}' is not in the cart") from None

    def add_product(self, product: Mapping[str, Any]) -> CartItem:
        """Add one unit of a catalog product; adding it again bumps the quantity."""
        product_id = str(product["id"])
        if product_id in self._items:
            return self.change_quantity(product_id, 1)
        item = CartItem(
            id=product_id,
            name=product.get("product_name") or product.get("name") or "",
            price=product.get("price") or 0,
            purchase_price=product.get("purchase_price") or 0,
        )
        self._items[product_id] = item
        return item

    def quick_add(self, name: str, price: float, quantity: int = 1) -> CartItem:
        """Add an ad-hoc line that is not in the catalog; its cost is unknown."""
        if not name.strip():
            raise PosError("Item name is required")
        if price < 0:
            raise PosError("Price cannot be negative")
        self._quick_counter += 1
        item = CartItem(
            id=f"quick-{self._quick_counter}",
            name=name.strip(),
            price=price,
            quantity=max(1, quantity),
            is_quick_add=True,
        )
        self._items[item.id] = item
        return item

    def remove(self, item_id: str) -> None:
        self._require(item_id)
        del self._items[item_id]

    def change_quantity(self, item_id: str, delta: int) -> CartItem:
        """Shift the quantity by ``delta``; it never drops below 1."""
        item = self._require(item_id)
        updated = item.model_copy(update={"quantity": max(1, item.quantity + delta)})
        self._items[item_id] = updated
        return updated

    def set_price(self, item_id: str, price: float) -> CartItem:
        if price < 0:
            raise PosError("Price cannot be negative")
        item = self._require(item_id)
        updated = item.model_copy(update={"price": price})
        self._items[item_id] = updated
        return updated

    def clear(self) -> None:
        self._items.clear()

    @property
    def total(self) -> float:
        return sum(item.line_total for item in self._items.values())

    @property
    def margin(self) -> float:
        return sum(item.line_margin for item in self._items.values())
