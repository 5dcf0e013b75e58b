"""The authenticated user's wishlist."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from shopfront.application.add_wishlist_item import AddWishlistItemHandler
from shopfront.application.ports import Identity
from shopfront.application.remove_wishlist_item import RemoveWishlistItemHandler
from shopfront.application.show_wishlist import ShowWishlistHandler
from shopfront.infrastructure.bootstrap import Container
from shopfront.infrastructure.http.dependencies import current_identity, get_container
from shopfront.infrastructure.http.presenters import wishlist_json
from shopfront.infrastructure.http.schemas import WishlistItemIn

router = APIRouter(prefix="/wishlist", tags=["Wishlist"])


@router.get("")
async def get_wishlist(
    identity: Identity = Depends(current_identity),
    container: Container = Depends(get_container),
):
    wishlist = await ShowWishlistHandler(container.wishlists).handle(identity.subject)
    return wishlist_json(wishlist)


@router.post("/items")
async def add_item(
    payload: WishlistItemIn,
    identity: Identity = Depends(current_identity),
    container: Container = Depends(get_container),
):
    handler = AddWishlistItemHandler(container.wishlists, container.products)
    wishlist = await handler.handle(identity.subject, payload.product_id)
    return wishlist_json(wishlist)


@router.delete("/items/{product_id}")
async def remove_item(
    product_id: int,
    identity: Identity = Depends(current_identity),
    container: Container = Depends(get_container),
):
    wishlist = await RemoveWishlistItemHandler(container.wishlists).handle(
        identity.subject, product_id
    )
    return wishlist_json(wishlist)
