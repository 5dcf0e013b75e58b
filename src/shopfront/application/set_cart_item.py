"""Application service: Set Cart Item Quantity use case."""

from __future__ import annotations

from typing import Callable

from shopfront.domain.model.cart import Cart
from shopfront.domain.model.value_objects import ProductId, Quantity, now_ms
from shopfront.domain.repository.cart_repository import CartRepository


class SetCartItemHandler:

    def __init__(self, cart_repo: CartRepository, clock: Callable[[], int] = now_ms) -> None:
        self._cart_repo = cart_repo
        self._clock = clock

    async def handle(self, user_id: str, product_id: int, quantity: int) -> Cart:
        """Overwrite a line's quantity, adding the line if it is missing.

        The product reference is not checked against the catalog here.
        """
        pid = ProductId(product_id).value
        qty = Quantity(quantity).value
        return await self._cart_repo.upsert(
            user_id, lambda cart: cart.set_item_quantity(pid, qty, at=self._clock())
        )
