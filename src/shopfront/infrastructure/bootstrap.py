"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass

from shopfront.application.ports import AdminPolicy, PasswordHasher, TokenService
from shopfront.infrastructure.config import Settings
from shopfront.infrastructure.persistence.json_cart_repository import JsonCartRepository
from shopfront.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)
from shopfront.infrastructure.persistence.json_record_store import JsonRecordStore
from shopfront.infrastructure.persistence.json_user_repository import JsonUserRepository
from shopfront.infrastructure.persistence.json_wishlist_repository import (
    JsonWishlistRepository,
)
from shopfront.infrastructure.security.admin import EmailAdminPolicy
from shopfront.infrastructure.security.passwords import BcryptPasswordHasher
from shopfront.infrastructure.security.tokens import JwtTokenService


@dataclass
class Container:
    settings: Settings
    users: JsonUserRepository
    products: JsonProductRepository
    carts: JsonCartRepository
    wishlists: JsonWishlistRepository
    hasher: PasswordHasher
    tokens: TokenService
    admin_policy: AdminPolicy


def _guard(settings: Settings) -> asyncio.Lock | None:
    return asyncio.Lock() if settings.serialize_writes else None


def build_container(settings: Settings) -> Container:
    """One store and one repository per entity kind."""
    return Container(
        settings=settings,
        users=JsonUserRepository(JsonRecordStore(settings.path_for("users")), _guard(settings)),
        products=JsonProductRepository(
            JsonRecordStore(settings.path_for("products")), _guard(settings)
        ),
        carts=JsonCartRepository(JsonRecordStore(settings.path_for("carts")), _guard(settings)),
        wishlists=JsonWishlistRepository(
            JsonRecordStore(settings.path_for("wishlists")), _guard(settings)
        ),
        hasher=BcryptPasswordHasher(rounds=settings.bcrypt_rounds),
        tokens=JwtTokenService(settings.jwt_secret, settings.jwt_expires_minutes),
        admin_policy=EmailAdminPolicy(settings.admin_emails),
    )
