"""Product catalog. Reads need a bearer token, writes need an admin."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Response

from shopfront.application.add_product import AddProductHandler
from shopfront.application.delete_product import DeleteProductHandler
from shopfront.application.dto import ProductChanges, ProductSpec
from shopfront.application.update_product import UpdateProductHandler
from shopfront.domain.exceptions import EntityNotFoundError
from shopfront.infrastructure.bootstrap import Container
from shopfront.infrastructure.http.dependencies import (
    current_identity,
    get_container,
    require_admin,
)
from shopfront.infrastructure.http.presenters import product_json
from shopfront.infrastructure.http.schemas import ProductIn, ProductPatch

router = APIRouter(prefix="/products", tags=["Products"])


@router.get("", dependencies=[Depends(current_identity)])
async def list_products(container: Container = Depends(get_container)):
    return [product_json(p) for p in await container.products.list_all()]


@router.get("/{product_id}", dependencies=[Depends(current_identity)])
async def get_product(product_id: int, container: Container = Depends(get_container)):
    product = await container.products.get_by_id(product_id)
    if product is None:
        raise EntityNotFoundError("Product not found")
    return product_json(product)


@router.post("", status_code=201, dependencies=[Depends(require_admin)])
async def create_product(payload: ProductIn, container: Container = Depends(get_container)):
    handler = AddProductHandler(container.products)
    product = await handler.handle(
        ProductSpec(
            name=payload.name,
            category=payload.category,
            price=payload.price,
            quantity=payload.quantity,
            description=payload.description,
            image=payload.image,
        )
    )
    return product_json(product)


@router.put("/{product_id}", dependencies=[Depends(require_admin)])
async def update_product(
    product_id: int,
    payload: ProductPatch,
    container: Container = Depends(get_container),
):
    handler = UpdateProductHandler(container.products)
    product = await handler.handle(
        product_id, ProductChanges(**payload.model_dump(exclude_unset=True))
    )
    return product_json(product)


@router.delete("/{product_id}", status_code=204, dependencies=[Depends(require_admin)])
async def delete_product(product_id: int, container: Container = Depends(get_container)):
    handler = DeleteProductHandler(container.products, container.carts, container.wishlists)
    await handler.handle(product_id)
    return Response(status_code=204)
