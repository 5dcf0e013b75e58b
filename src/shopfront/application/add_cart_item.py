"""Application service: Add Cart Item use case.

Validates the product reference against the catalog before the cart
collection is touched, so a missing product never leaves a trace.
"""

from __future__ import annotations

from typing import Callable

from shopfront.domain.exceptions import EntityNotFoundError
from shopfront.domain.model.cart import Cart
from shopfront.domain.model.value_objects import ProductId, Quantity, now_ms
from shopfront.domain.repository.cart_repository import CartRepository
from shopfront.domain.repository.product_repository import ProductRepository


class AddCartItemHandler:

    def __init__(
        self,
        cart_repo: CartRepository,
        product_repo: ProductRepository,
        clock: Callable[[], int] = now_ms,
    ) -> None:
        self._cart_repo = cart_repo
        self._product_repo = product_repo
        self._clock = clock

    async def handle(self, user_id: str, product_id: int, quantity: int = 1) -> Cart:
        pid = ProductId(product_id).value
        qty = Quantity(quantity).value

        if await self._product_repo.get_by_id(pid) is None:
            raise EntityNotFoundError("Product not found")

        return await self._cart_repo.upsert(
            user_id, lambda cart: cart.add_item(pid, qty, at=self._clock())
        )
