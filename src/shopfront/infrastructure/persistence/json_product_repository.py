"""JSON-file-backed implementation of ProductRepository.

Product ids are never reused. Besides the collection itself the
repository keeps the last issued id in a sidecar file
(``products.json`` -> ``products.seq.json``), so deleting the newest
product does not hand its id to the next one.
"""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Callable

from shopfront.domain.exceptions import EntityNotFoundError
from shopfront.domain.model.product import Product
from shopfront.domain.repository.product_repository import ProductRepository
from shopfront.infrastructure.persistence.json_keyed_repository import JsonKeyedRepository
from shopfront.infrastructure.persistence.json_record_store import JsonRecordStore


def next_product_id(records: list[dict], last_issued: int = 0) -> int:
    """Collection length + 1, moved past every id seen or issued so far."""
    highest = max((raw["id"] for raw in records), default=0)
    return max(len(records), highest, last_issued) + 1


def sequence_path_for(file_path: Path) -> Path:
    return file_path.with_name(f"{file_path.stem}.seq.json")


class JsonProductRepository(JsonKeyedRepository[Product], ProductRepository):

    not_found_message = "Product not found"

    def __init__(
        self,
        store: JsonRecordStore,
        guard: asyncio.Lock | None = None,
        sequence: JsonRecordStore | None = None,
    ) -> None:
        super().__init__(store, guard)
        self._sequence = sequence or JsonRecordStore(sequence_path_for(store.file_path))

    # --- ProductRepository interface ------------------------------------------

    async def get_by_id(self, product_id: int) -> Product | None:
        return await self._find(product_id)

    async def list_all(self) -> list[Product]:
        return await self._list()

    async def create(self, factory: Callable[[int], Product]) -> Product:
        async with self._cycle():
            records = await self._store.load()
            product = factory(next_product_id(records, await self._last_issued()))
            records.append(self._to_raw(product))
            await self._store.replace(records)
            await self._sequence.replace([{"lastId": product.id}])
            return product

    async def update(self, product_id: int, mutator: Callable[[Product], None]) -> Product:
        return await self._upsert(product_id, mutator)

    async def delete(self, product_id: int) -> None:
        if not await self._remove(product_id):
            raise EntityNotFoundError(self.not_found_message)

    async def _last_issued(self) -> int:
        return max((raw.get("lastId", 0) for raw in await self._sequence.load()), default=0)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _key_of(raw: dict) -> int:
        return raw["id"]

    @staticmethod
    def _to_raw(product: Product) -> dict:
        return {
            "id": product.id,
            "code": product.code,
            "name": product.name,
            "description": product.description,
            "image": product.image,
            "category": product.category,
            "price": product.price,
            "quantity": product.quantity,
            "internalReference": product.internal_reference,
            "shellId": product.shell_id,
            "inventoryStatus": product.inventory_status.value,
            "rating": product.rating,
            "createdAt": product.created_at,
            "updatedAt": product.updated_at,
        }

    @staticmethod
    def _to_domain(raw: dict) -> Product:
        return Product(
            id=raw["id"],
            code=raw.get("code", ""),
            name=raw["name"],
            description=raw.get("description"),
            image=raw.get("image"),
            category=raw.get("category", ""),
            price=raw["price"],
            quantity=raw.get("quantity", 0),
            internal_reference=raw.get("internalReference", ""),
            shell_id=raw.get("shellId", 0),
            rating=raw.get("rating", 0),
            created_at=raw.get("createdAt", 0),
            updated_at=raw.get("updatedAt", 0),
        )
