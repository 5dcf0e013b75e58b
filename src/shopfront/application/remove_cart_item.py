"""Application service: Remove Cart Item use case."""

from __future__ import annotations

from typing import Callable

from shopfront.domain.model.cart import Cart
from shopfront.domain.model.value_objects import ProductId, now_ms
from shopfront.domain.repository.cart_repository import CartRepository


class RemoveCartItemHandler:

    def __init__(self, cart_repo: CartRepository, clock: Callable[[], int] = now_ms) -> None:
        self._cart_repo = cart_repo
        self._clock = clock

    async def handle(self, user_id: str, product_id: int) -> Cart:
        """Remove a line. Absent products are a no-op that still persists."""
        pid = ProductId(product_id).value
        return await self._cart_repo.upsert(
            user_id, lambda cart: cart.remove_item(pid, at=self._clock())
        )
