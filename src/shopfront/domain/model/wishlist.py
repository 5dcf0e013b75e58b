"""Wishlist aggregate — an ordered set of product ids per user."""

from __future__ import annotations

from dataclasses import dataclass, field

from shopfront.domain.model.value_objects import ProductId, now_ms


@dataclass
class Wishlist:

    user_id: str
    product_ids: list[int] = field(default_factory=list)
    updated_at: int = field(default_factory=now_ms)

    @staticmethod
    def empty(user_id: str, at: int | None = None) -> Wishlist:
        return Wishlist(user_id=user_id, product_ids=[], updated_at=now_ms() if at is None else at)

    def add_product(self, product_id: int, at: int | None = None) -> None:
        """Idempotent: a product already on the list is not duplicated."""
        pid = ProductId(product_id).value
        if pid not in self.product_ids:
            self.product_ids.append(pid)
        self._touch(at)

    def remove_product(self, product_id: int, at: int | None = None) -> None:
        pid = ProductId(product_id).value
        self.product_ids = [p for p in self.product_ids if p != pid]
        self._touch(at)

    def discard_product(self, product_id: int, at: int | None = None) -> bool:
        if product_id not in self.product_ids:
            return False
        self.product_ids = [p for p in self.product_ids if p != product_id]
        self._touch(at)
        return True

    def _touch(self, at: int | None) -> None:
        self.updated_at = now_ms() if at is None else at
