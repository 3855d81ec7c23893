"""Unit tests for the POS cart."""

import pytest

from src.commerce.pos import Cart, PosError

RICE = {"id": "p1", "product_name": "Basmati Rice", "price": 499, "purchase_price": 420}
SALT = {"id": "p2", "product_name": "Sea Salt", "price": 20}


def test_adding_same_product_bumps_quantity():
    cart = Cart()
    cart.add_product(RICE)
    item = cart.add_product(RICE)

    assert len(cart) == 1
    assert item.quantity == 2
    assert cart.total == 998


def test_quick_add_items_get_unique_ids():
    cart = Cart()
    first = cart.quick_add("Carry bag", 5)
    second = cart.quick_add("Carry bag", 5, quantity=3)

    assert first.id != second.id
    assert second.is_quick_add
    assert cart.total == 20


def test_quick_add_requires_name_and_price():
    cart = Cart()
    with pytest.raises(PosError):
        cart.quick_add("  ", 5)
    with pytest.raises(PosError):
        cart.quick_add("Bag", -1)


def test_quantity_never_drops_below_one():
    cart = Cart()
    cart.add_product(SALT)

    assert cart.change_quantity("p2", -5).quantity == 1
    assert cart.change_quantity("p2", 2).quantity == 3


def test_set_price_and_margin():
    cart = Cart()
    cart.add_product(RICE)
    cart.add_product(SALT)
    cart.set_price("p1", 480)

    assert cart.total == 500
    assert cart.margin == (480 - 420) + 20


def test_remove_and_clear():
    cart = Cart()
    cart.add_product(RICE)
    cart.add_product(SALT)

    cart.remove("p1")
    assert [item.id for item in cart.items] == ["p2"]

    with pytest.raises(PosError):
        cart.remove("p1")

    cart.clear()
    assert cart.total == 0
