"""Application service: Add Wishlist Item use case."""

from __future__ import annotations

from typing import Callable

from shopfront.domain.exceptions import EntityNotFoundError
from shopfront.domain.model.value_objects import ProductId, now_ms
from shopfront.domain.model.wishlist import Wishlist
from shopfront.domain.repository.product_repository import ProductRepository
from shopfront.domain.repository.wishlist_repository import WishlistRepository


class AddWishlistItemHandler:

    def __init__(
        self,
        wishlist_repo: WishlistRepository,
        product_repo: ProductRepository,
        clock: Callable[[], int] = now_ms,
    ) -> None:
        self._wishlist_repo = wishlist_repo
        self._product_repo = product_repo
        self._clock = clock

    async def handle(self, user_id: str, product_id: int) -> Wishlist:
        pid = ProductId(product_id).value

        if await self._product_repo.get_by_id(pid) is None:
            raise EntityNotFoundError("Product not found")

        return await self._wishlist_repo.upsert(
            user_id, lambda wishlist: wishlist.add_product(pid, at=self._clock())
        )
