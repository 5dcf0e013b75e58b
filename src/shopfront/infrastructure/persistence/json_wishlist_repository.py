"""JSON-file-backed implementation of WishlistRepository."""

from __future__ import annotations

from typing import Callable

from shopfront.domain.model.wishlist import Wishlist
from shopfront.domain.repository.wishlist_repository import WishlistRepository
from shopfront.infrastructure.persistence.json_keyed_repository import JsonKeyedRepository


class JsonWishlistRepository(JsonKeyedRepository[Wishlist], WishlistRepository):

    # --- WishlistRepository interface -----------------------------------------

    async def get_by_user(self, user_id: str) -> Wishlist | None:
        return await self._find(user_id)

    async def list_all(self) -> list[Wishlist]:
        return await self._list()

    async def upsert(self, user_id: str, mutator: Callable[[Wishlist], None]) -> Wishlist:
        return await self._upsert(user_id, mutator)

    async def discard_product(self, product_id: int, at: int | None = None) -> int:
        return await self._rewrite_each(lambda w: w.discard_product(product_id, at))

    def _new(self, user_id: str) -> Wishlist:
        return Wishlist.empty(user_id)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _key_of(raw: dict) -> str:
        return raw["userId"]

    @staticmethod
    def _to_raw(wishlist: Wishlist) -> dict:
        return {
            "userId": wishlist.user_id,
            "productIds": list(wishlist.product_ids),
            "updatedAt": wishlist.updated_at,
        }

    @staticmethod
    def _to_domain(raw: dict) -> Wishlist:
        return Wishlist(
            user_id=raw["userId"],
            product_ids=list(raw.get("productIds", [])),
            updated_at=raw.get("updatedAt", 0),
        )
