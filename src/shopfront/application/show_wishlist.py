"""Application service: Show Wishlist use case (query)."""

from __future__ import annotations

from typing import Callable

from shopfront.domain.model.value_objects import now_ms
from shopfront.domain.model.wishlist import Wishlist
from shopfront.domain.repository.wishlist_repository import WishlistRepository


class ShowWishlistHandler:

    def __init__(self, wishlist_repo: WishlistRepository, clock: Callable[[], int] = now_ms) -> None:
        self._wishlist_repo = wishlist_repo
        self._clock = clock

    async def handle(self, user_id: str) -> Wishlist:
        wishlist = await self._wishlist_repo.get_by_user(user_id)
        if wishlist is None:
            return Wishlist.empty(user_id, at=self._clock())
        return wishlist
