"""Application service: Update Product use case."""

from __future__ import annotations

import logging
from typing import Callable

from shopfront.application.dto import ProductChanges
from shopfront.domain.model.product import Product
from shopfront.domain.model.value_objects import now_ms
from shopfront.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class UpdateProductHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        clock: Callable[[], int] = now_ms,
    ) -> None:
        self._product_repo = product_repo
        self._clock = clock

    async def handle(self, product_id: int, changes: ProductChanges) -> Product:
        """Patch a product. The inventory status follows the resulting quantity."""

        def mutate(product: Product) -> None:
            product.apply_changes(
                name=changes.name,
                description=changes.description,
                image=changes.image,
                category=changes.category,
                price=changes.price,
                quantity=changes.quantity,
                at=self._clock(),
            )

        product = await self._product_repo.update(product_id, mutate)
        logger.info("Product #%s updated", product_id)
        return product
