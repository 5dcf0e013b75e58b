"""Product aggregate.

Products live independently of carts and wishlists. Only an administrator
creates, edits or removes them. The inventory status is never set
directly: it always follows the stock quantity.
"""

from __future__ import annotations

import math
import random
import secrets
import string
import uuid
from dataclasses import dataclass
from enum import Enum

from shopfront.domain.exceptions import ValidationError
from shopfront.domain.model.value_objects import now_ms

_BASE36 = string.digits + string.ascii_lowercase


class InventoryStatus(Enum):
    INSTOCK = "INSTOCK"
    OUTOFSTOCK = "OUTOFSTOCK"

    @staticmethod
    def for_quantity(quantity: int) -> InventoryStatus:
        return InventoryStatus.INSTOCK if quantity > 0 else InventoryStatus.OUTOFSTOCK


def _check_price(price: float) -> float:
    if isinstance(price, bool) or not isinstance(price, (int, float)):
        raise ValidationError("Product price must be a number")
    if not math.isfinite(price):
        raise ValidationError("Product price must be a finite number")
    if price < 0:
        raise ValidationError("Product price cannot be negative")
    return price


def _check_stock(quantity: int) -> int:
    if isinstance(quantity, bool) or not isinstance(quantity, int):
        raise ValidationError("Product quantity must be an integer")
    if quantity < 0:
        raise ValidationError("Product quantity cannot be negative")
    return quantity


def _check_text(label: str, value: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"Product {label} is required")
    return value.strip()


def generate_code() -> str:
    return f"PROD-{uuid.uuid4().hex[:12].upper()}"


def generate_internal_reference() -> str:
    return "REF-" + "".join(secrets.choice(_BASE36) for _ in range(9))


def generate_shell_id() -> int:
    return random.randrange(1000)


@dataclass
class Product:
    """A product in the catalog.

    ``__init__`` is kept plain so the repository can reconstitute
    persisted products without re-validating; new products go through
    ``Product.create()``.
    """

    id: int
    code: str
    name: str
    description: str | None
    image: str | None
    category: str
    price: float
    quantity: int
    internal_reference: str
    shell_id: int
    rating: float
    created_at: int
    updated_at: int

    @property
    def inventory_status(self) -> InventoryStatus:
        return InventoryStatus.for_quantity(self.quantity)

    @staticmethod
    def create(
        product_id: int,
        name: str,
        category: str,
        price: float,
        quantity: int,
        description: str | None = None,
        image: str | None = None,
        at: int | None = None,
    ) -> Product:
        """Build a new catalog entry with generated code and references."""
        timestamp = now_ms() if at is None else at
        return Product(
            id=product_id,
            code=generate_code(),
            name=_check_text("name", name),
            description=description,
            image=image,
            category=_check_text("category", category),
            price=_check_price(price),
            quantity=_check_stock(quantity),
            internal_reference=generate_internal_reference(),
            shell_id=generate_shell_id(),
            rating=0,
            created_at=timestamp,
            updated_at=timestamp,
        )

    def apply_changes(
        self,
        *,
        name: str | None = None,
        description: str | None = None,
        image: str | None = None,
        category: str | None = None,
        price: float | None = None,
        quantity: int | None = None,
        at: int | None = None,
    ) -> None:
        """Patch the given fields; ``None`` means "leave unchanged"."""
        if name is not None:
            self.name = _check_text("name", name)
        if description is not None:
            self.description = description
        if image is not None:
            self.image = image
        if category is not None:
            self.category = _check_text("category", category)
        if price is not None:
            self.price = _check_price(price)
        if quantity is not None:
            self.quantity = _check_stock(quantity)
        self.updated_at = now_ms() if at is None else at
