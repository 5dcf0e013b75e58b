"""Unit tests for the Cart aggregate's merge policy."""

import pytest

from shopfront.domain.exceptions import ValidationError
from shopfront.domain.model.cart import Cart, CartLineItem


def _cart(*items: tuple[int, int]) -> Cart:
    return Cart(
        user_id="user-1",
        items=[CartLineItem(product_id=p, quantity=q) for p, q in items],
        updated_at=100,
    )


class TestCartAddItem:

    def test_add_to_empty_cart_appends_line(self):
        cart = Cart.empty("user-1", at=100)
        cart.add_item(1, 2, at=200)
        assert cart.items == [CartLineItem(1, 2)]
        assert cart.updated_at == 200

    def test_add_same_product_accumulates(self):
        cart = Cart.empty("user-1")
        cart.add_item(1, 2)
        cart.add_item(1, 3)
        assert cart.items == [CartLineItem(1, 5)]

    def test_add_other_product_keeps_order(self):
        cart = _cart((1, 1))
        cart.add_item(2, 4)
        assert [i.product_id for i in cart.items] == [1, 2]

    def test_zero_quantity_rejected(self):
        cart = _cart()
        with pytest.raises(ValidationError, match="must be positive"):
            cart.add_item(1, 0)
        assert cart.items == []
        assert cart.updated_at == 100

    def test_invalid_product_id_rejected(self):
        with pytest.raises(ValidationError, match="Invalid productId"):
            _cart().add_item(0, 1)


class TestCartSetItemQuantity:

    def test_overwrites_existing_quantity(self):
        cart = _cart((1, 5))
        cart.set_item_quantity(1, 2, at=300)
        assert cart.items == [CartLineItem(1, 2)]
        assert cart.updated_at == 300

    def test_appends_missing_line(self):
        cart = _cart((1, 5))
        cart.set_item_quantity(9, 1)
        assert cart.find_item(9) == CartLineItem(9, 1)

    def test_negative_quantity_rejected(self):
        with pytest.raises(ValidationError):
            _cart((1, 5)).set_item_quantity(1, -1)


class TestCartRemoveItem:

    def test_removes_line(self):
        cart = _cart((1, 5), (2, 1))
        cart.remove_item(1)
        assert cart.items == [CartLineItem(2, 1)]

    def test_removing_absent_product_only_touches_timestamp(self):
        cart = _cart((1, 5))
        cart.remove_item(42, at=999)
        assert cart.items == [CartLineItem(1, 5)]
        assert cart.updated_at == 999


class TestCartDiscardProduct:

    def test_reports_change(self):
        cart = _cart((1, 5), (2, 1))
        assert cart.discard_product(2, at=500) is True
        assert cart.items == [CartLineItem(1, 5)]
        assert cart.updated_at == 500

    def test_untouched_when_absent(self):
        cart = _cart((1, 5))
        assert cart.discard_product(2, at=500) is False
        assert cart.updated_at == 100
