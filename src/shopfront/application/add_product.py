"""Application service: Add Product use case."""

from __future__ import annotations

import logging
from typing import Callable

from shopfront.application.dto import ProductSpec
from shopfront.domain.model.product import Product
from shopfront.domain.model.value_objects import now_ms
from shopfront.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class AddProductHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        clock: Callable[[], int] = now_ms,
    ) -> None:
        self._product_repo = product_repo
        self._clock = clock

    async def handle(self, spec: ProductSpec) -> Product:
        """Add a new product to the catalog."""
        at = self._clock()

        def build(product_id: int) -> Product:
            return Product.create(
                product_id=product_id,
                name=spec.name,
                category=spec.category,
                price=spec.price,
                quantity=spec.quantity,
                description=spec.description,
                image=spec.image,
                at=at,
            )

        product = await self._product_repo.create(build)
        logger.info("Product #%s '%s' added", product.id, product.name)
        return product
