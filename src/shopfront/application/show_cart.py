"""Application service: Show Cart use case (query)."""

from __future__ import annotations

from typing import Callable

from shopfront.domain.model.cart import Cart
from shopfront.domain.model.value_objects import now_ms
from shopfront.domain.repository.cart_repository import CartRepository


class ShowCartHandler:

    def __init__(self, cart_repo: CartRepository, clock: Callable[[], int] = now_ms) -> None:
        self._cart_repo = cart_repo
        self._clock = clock

    async def handle(self, user_id: str) -> Cart:
        """Return the user's cart, or a transient empty one (not persisted)."""
        cart = await self._cart_repo.get_by_user(user_id)
        if cart is None:
            return Cart.empty(user_id, at=self._clock())
        return cart
