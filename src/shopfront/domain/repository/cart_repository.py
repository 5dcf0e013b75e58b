"""Abstract repository for the Cart aggregate (keyed by user id)."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable

from shopfront.domain.model.cart import Cart


class CartRepository(ABC):

    @abstractmethod
    async def get_by_user(self, user_id: str) -> Cart | None:
        """Return the user's cart, or None if it was never created."""

    @abstractmethod
    async def list_all(self) -> list[Cart]:
        """Return every stored cart."""

    @abstractmethod
    async def upsert(self, user_id: str, mutator: Callable[[Cart], None]) -> Cart:
        """Load (or lazily create) the user's cart, apply ``mutator`` and
        persist the whole collection. Returns the mutated cart."""

    @abstractmethod
    async def discard_product(self, product_id: int, at: int | None = None) -> int:
        """Drop ``product_id`` from every cart; return how many changed."""
