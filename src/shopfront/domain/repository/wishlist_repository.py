"""Abstract repository for the Wishlist aggregate (keyed by user id)."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable

from shopfront.domain.model.wishlist import Wishlist


class WishlistRepository(ABC):

    @abstractmethod
    async def get_by_user(self, user_id: str) -> Wishlist | None:
        """Return the user's wishlist, or None if it was never created."""

    @abstractmethod
    async def list_all(self) -> list[Wishlist]:
        """Return every stored wishlist."""

    @abstractmethod
    async def upsert(self, user_id: str, mutator: Callable[[Wishlist], None]) -> Wishlist:
        """Load (or lazily create) the user's wishlist, apply ``mutator``
        and persist the whole collection. Returns the mutated wishlist."""

    @abstractmethod
    async def discard_product(self, product_id: int, at: int | None = None) -> int:
        """Drop ``product_id`` from every wishlist; return how many changed."""
