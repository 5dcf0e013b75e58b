"""Application service: Delete Product use case.

Coordinates three aggregates: the product is removed from the catalog,
then from every cart and wishlist that still references it. Each
collection is rewritten in its own cycle; there is no cross-file
transaction.
"""

from __future__ import annotations

import logging
from typing import Callable

from shopfront.domain.model.value_objects import now_ms
from shopfront.domain.repository.cart_repository import CartRepository
from shopfront.domain.repository.product_repository import ProductRepository
from shopfront.domain.repository.wishlist_repository import WishlistRepository

logger = logging.getLogger(__name__)


class DeleteProductHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        cart_repo: CartRepository,
        wishlist_repo: WishlistRepository,
        clock: Callable[[], int] = now_ms,
    ) -> None:
        self._product_repo = product_repo
        self._cart_repo = cart_repo
        self._wishlist_repo = wishlist_repo
        self._clock = clock

    async def handle(self, product_id: int) -> None:
        await self._product_repo.delete(product_id)

        at = self._clock()
        carts = await self._cart_repo.discard_product(product_id, at)
        wishlists = await self._wishlist_repo.discard_product(product_id, at)
        logger.info(
            "Product #%s deleted (removed from %d carts, %d wishlists)",
            product_id, carts, wishlists,
        )
