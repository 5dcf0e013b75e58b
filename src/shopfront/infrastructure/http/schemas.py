"""Request bodies accepted by the HTTP API.

All models fail closed: unknown fields are rejected instead of being
silently ignored, so a client cannot smuggle e.g. ``inventoryStatus`` or
``id`` into a product.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class StrictModel(BaseModel):
    model_config = ConfigDict(extra="forbid", populate_by_name=True)


class AccountIn(StrictModel):
    username: str = Field(..., min_length=1)
    firstname: str = Field(..., min_length=1)
    email: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class CredentialsIn(StrictModel):
    email: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class ProductIn(StrictModel):
    name: str = Field(..., min_length=1)
    category: str = Field(..., min_length=1)
    price: float = Field(..., ge=0, allow_inf_nan=False)
    quantity: int = Field(..., ge=0)
    description: Optional[str] = None
    image: Optional[str] = None


class ProductPatch(StrictModel):
    name: Optional[str] = Field(None, min_length=1)
    category: Optional[str] = Field(None, min_length=1)
    price: Optional[float] = Field(None, ge=0, allow_inf_nan=False)
    quantity: Optional[int] = Field(None, ge=0)
    description: Optional[str] = None
    image: Optional[str] = None

    @field_validator("name", "category", "price", "quantity")
    @classmethod
    def reject_null(cls, value):
        # Omit a field to keep it; null is not a way to clear it.
        if value is None:
            raise ValueError("must not be null")
        return value


class CartItemIn(StrictModel):
    product_id: int = Field(..., alias="productId", gt=0)
    quantity: int = Field(1, gt=0)


class CartQuantityIn(StrictModel):
    quantity: int = Field(..., gt=0)


class WishlistItemIn(StrictModel):
    product_id: int = Field(..., alias="productId", gt=0)
