"""Abstract repository for the Product aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable

from shopfront.domain.model.product import Product


class ProductRepository(ABC):

    @abstractmethod
    async def get_by_id(self, product_id: int) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    async def list_all(self) -> list[Product]:
        """Return every product in the catalog."""

    @abstractmethod
    async def create(self, factory: Callable[[int], Product]) -> Product:
        """Assign the next product id, build the product with ``factory``
        and append it, all in a single read-modify-write cycle."""

    @abstractmethod
    async def update(self, product_id: int, mutator: Callable[[Product], None]) -> Product:
        """Apply ``mutator`` to a stored product and persist it.

        Raises EntityNotFoundError if the product does not exist.
        """

    @abstractmethod
    async def delete(self, product_id: int) -> None:
        """Remove a product. Raises EntityNotFoundError if absent."""
