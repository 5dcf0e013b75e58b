"""Application service: Remove Wishlist Item use case."""

from __future__ import annotations

from typing import Callable

from shopfront.domain.model.value_objects import ProductId, now_ms
from shopfront.domain.model.wishlist import Wishlist
from shopfront.domain.repository.wishlist_repository import WishlistRepository


class RemoveWishlistItemHandler:

    def __init__(self, wishlist_repo: WishlistRepository, clock: Callable[[], int] = now_ms) -> None:
        self._wishlist_repo = wishlist_repo
        self._clock = clock

    async def handle(self, user_id: str, product_id: int) -> Wishlist:
        pid = ProductId(product_id).value
        return await self._wishlist_repo.upsert(
            user_id, lambda wishlist: wishlist.remove_product(pid, at=self._clock())
        )
