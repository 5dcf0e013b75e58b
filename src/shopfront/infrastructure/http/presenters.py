"""Domain objects to JSON response bodies (camelCase wire format)."""

from __future__ import annotations

from shopfront.domain.model.cart import Cart
from shopfront.domain.model.product import Product
from shopfront.domain.model.wishlist import Wishlist


def product_json(product: Product) -> dict:
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


def cart_json(cart: Cart) -> dict:
    return {
        "userId": cart.user_id,
        "items": [{"productId": i.product_id, "quantity": i.quantity} for i in cart.items],
        "updatedAt": cart.updated_at,
    }


def wishlist_json(wishlist: Wishlist) -> dict:
    return {
        "userId": wishlist.user_id,
        "productIds": list(wishlist.product_ids),
        "updatedAt": wishlist.updated_at,
    }
