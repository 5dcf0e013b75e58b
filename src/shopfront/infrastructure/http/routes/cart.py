"""The authenticated user's cart."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from shopfront.application.add_cart_item import AddCartItemHandler
from shopfront.application.ports import Identity
from shopfront.application.remove_cart_item import RemoveCartItemHandler
from shopfront.application.set_cart_item import SetCartItemHandler
from shopfront.application.show_cart import ShowCartHandler
from shopfront.infrastructure.bootstrap import Container
from shopfront.infrastructure.http.dependencies import current_identity, get_container
from shopfront.infrastructure.http.presenters import cart_json
from shopfront.infrastructure.http.schemas import CartItemIn, CartQuantityIn

router = APIRouter(prefix="/cart", tags=["Cart"])


@router.get("")
async def get_cart(
    identity: Identity = Depends(current_identity),
    container: Container = Depends(get_container),
):
    cart = await ShowCartHandler(container.carts).handle(identity.subject)
    return cart_json(cart)


@router.post("/items")
async def add_item(
    payload: CartItemIn,
    identity: Identity = Depends(current_identity),
    container: Container = Depends(get_container),
):
    handler = AddCartItemHandler(container.carts, container.products)
    cart = await handler.handle(identity.subject, payload.product_id, payload.quantity)
    return cart_json(cart)


@router.patch("/items/{product_id}")
async def set_item_quantity(
    product_id: int,
    payload: CartQuantityIn,
    identity: Identity = Depends(current_identity),
    container: Container = Depends(get_container),
):
    handler = SetCartItemHandler(container.carts)
    cart = await handler.handle(identity.subject, product_id, payload.quantity)
    return cart_json(cart)


@router.delete("/items/{product_id}")
async def remove_item(
    product_id: int,
    identity: Identity = Depends(current_identity),
    container: Container = Depends(get_container),
):
    cart = await RemoveCartItemHandler(container.carts).handle(identity.subject, product_id)
    return cart_json(cart)
