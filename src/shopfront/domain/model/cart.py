"""Cart aggregate — one cart per user, holding product line items.

The cart owns its line items; a product appears at most once. Adding a
product that is already in the cart accumulates its quantity.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from shopfront.domain.model.value_objects import ProductId, Quantity, now_ms


@dataclass
class CartLineItem:

    product_id: int
    quantity: int


@dataclass
class Cart:
    """Aggregate root for a user's shopping cart.

    Invariants:
    - ``product_id`` is unique across ``items``
    - every line quantity is a positive integer
    """

    user_id: str
    items: list[CartLineItem] = field(default_factory=list)
    updated_at: int = field(default_factory=now_ms)

    @staticmethod
    def empty(user_id: str, at: int | None = None) -> Cart:
        return Cart(user_id=user_id, items=[], updated_at=now_ms() if at is None else at)

    def find_item(self, product_id: int) -> CartLineItem | None:
        for item in self.items:
            if item.product_id == product_id:
                return item
        return None

    def add_item(self, product_id: int, quantity: int, at: int | None = None) -> None:
        """Add ``quantity`` units, merging into an existing line."""
        pid = ProductId(product_id).value
        qty = Quantity(quantity).value

        item = self.find_item(pid)
        if item is not None:
            item.quantity += qty
        else:
            self.items.append(CartLineItem(product_id=pid, quantity=qty))
        self._touch(at)

    def set_item_quantity(self, product_id: int, quantity: int, at: int | None = None) -> None:
        """Overwrite a line's quantity, appending the line if missing."""
        pid = ProductId(product_id).value
        qty = Quantity(quantity).value

        item = self.find_item(pid)
        if item is not None:
            item.quantity = qty
        else:
            self.items.append(CartLineItem(product_id=pid, quantity=qty))
        self._touch(at)

    def remove_item(self, product_id: int, at: int | None = None) -> None:
        """Drop a line. Removing an absent product still re-timestamps."""
        pid = ProductId(product_id).value
        self.items = [item for item in self.items if item.product_id != pid]
        self._touch(at)

    def discard_product(self, product_id: int, at: int | None = None) -> bool:
        """Remove a deleted product's line; return whether anything changed."""
        if self.find_item(product_id) is None:
            return False
        self.items = [item for item in self.items if item.product_id != product_id]
        self._touch(at)
        return True

    def _touch(self, at: int | None) -> None:
        self.updated_at = now_ms() if at is None else at
