"""JSON-file-backed implementation of CartRepository."""

from __future__ import annotations

from typing import Callable

from shopfront.domain.model.cart import Cart, CartLineItem
from shopfront.domain.repository.cart_repository import CartRepository
from shopfront.infrastructure.persistence.json_keyed_repository import JsonKeyedRepository


class JsonCartRepository(JsonKeyedRepository[Cart], CartRepository):

    # --- CartRepository interface ---------------------------------------------

    async def get_by_user(self, user_id: str) -> Cart | None:
        return await self._find(user_id)

    async def list_all(self) -> list[Cart]:
        return await self._list()

    async def upsert(self, user_id: str, mutator: Callable[[Cart], None]) -> Cart:
        return await self._upsert(user_id, mutator)

    async def discard_product(self, product_id: int, at: int | None = None) -> int:
        return await self._rewrite_each(lambda cart: cart.discard_product(product_id, at))

    def _new(self, user_id: str) -> Cart:
        return Cart.empty(user_id)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _key_of(raw: dict) -> str:
        return raw["userId"]

    @staticmethod
    def _to_raw(cart: Cart) -> dict:
        return {
            "userId": cart.user_id,
            "items": [
                {"productId": item.product_id, "quantity": item.quantity}
                for item in cart.items
            ],
            "updatedAt": cart.updated_at,
        }

    @staticmethod
    def _to_domain(raw: dict) -> Cart:
        return Cart(
            user_id=raw["userId"],
            items=[
                CartLineItem(product_id=i["productId"], quantity=i["quantity"])
                for i in raw.get("items", [])
            ],
            updated_at=raw.get("updatedAt", 0),
        )
