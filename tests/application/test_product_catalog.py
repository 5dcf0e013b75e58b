"""Integration tests for the admin product use cases."""

import pytest

from shopfront.application.add_product import AddProductHandler
from shopfront.application.delete_product import DeleteProductHandler
from shopfront.application.dto import ProductChanges, ProductSpec
from shopfront.application.update_product import UpdateProductHandler
from shopfront.domain.exceptions import EntityNotFoundError, ValidationError
from shopfront.domain.model.cart import Cart, CartLineItem
from shopfront.domain.model.product import InventoryStatus
from shopfront.domain.model.wishlist import Wishlist
from tests.fakes import (
    FakeCartRepository,
    FakeProductRepository,
    FakeWishlistRepository,
    make_product,
)


def _spec(**overrides) -> ProductSpec:
    fields = dict(name="Lamp", category="home", price=25.0, quantity=4)
    fields.update(overrides)
    return ProductSpec(**fields)


class TestAddProduct:

    async def test_assigns_sequential_ids(self):
        repo = FakeProductRepository()
        handler = AddProductHandler(repo, clock=lambda: 7)

        first = await handler.handle(_spec())
        second = await handler.handle(_spec(name="Chair"))

        assert (first.id, second.id) == (1, 2)
        assert first.created_at == first.updated_at == 7

    async def test_status_derived_from_quantity(self):
        handler = AddProductHandler(FakeProductRepository())
        product = await handler.handle(_spec(quantity=0))
        assert product.inventory_status is InventoryStatus.OUTOFSTOCK

    async def test_invalid_price_rejected_and_nothing_saved(self):
        repo = FakeProductRepository()
        with pytest.raises(ValidationError):
            await AddProductHandler(repo).handle(_spec(price=-1))
        assert await repo.list_all() == []

    async def test_id_does_not_collide_after_delete(self):
        repo = FakeProductRepository([make_product(1), make_product(2), make_product(3)])
        await repo.delete(2)

        product = await AddProductHandler(repo).handle(_spec())
        assert product.id == 4

    async def test_newest_id_is_not_reused(self):
        repo = FakeProductRepository()
        handler = AddProductHandler(repo)
        await handler.handle(_spec())
        second = await handler.handle(_spec())
        await repo.delete(second.id)

        product = await handler.handle(_spec())
        assert product.id == 3


class TestUpdateProduct:

    async def test_patches_given_fields_only(self):
        repo = FakeProductRepository([make_product(1, name="Widget", quantity=5)])
        handler = UpdateProductHandler(repo, clock=lambda: 9_000)

        product = await handler.handle(1, ProductChanges(price=12.5))

        assert product.price == 12.5
        assert product.name == "Widget"
        assert product.updated_at == 9_000
        assert (await repo.get_by_id(1)).price == 12.5

    async def test_quantity_zero_goes_out_of_stock(self):
        repo = FakeProductRepository([make_product(1, quantity=5)])
        product = await UpdateProductHandler(repo).handle(1, ProductChanges(quantity=0))
        assert product.inventory_status is InventoryStatus.OUTOFSTOCK

    async def test_unknown_product_rejected(self):
        handler = UpdateProductHandler(FakeProductRepository())
        with pytest.raises(EntityNotFoundError, match="Product not found"):
            await handler.handle(99, ProductChanges(name="x"))


class TestDeleteProduct:

    async def test_cascades_to_carts_and_wishlists(self):
        products = FakeProductRepository([make_product(1), make_product(2)])
        carts = FakeCartRepository([
            Cart("u1", [CartLineItem(1, 2), CartLineItem(2, 1)], updated_at=0),
            Cart("u2", [CartLineItem(2, 3)], updated_at=0),
        ])
        wishlists = FakeWishlistRepository([Wishlist("u1", [1, 2], updated_at=0)])
        handler = DeleteProductHandler(products, carts, wishlists, clock=lambda: 50)

        await handler.handle(1)

        assert await products.get_by_id(1) is None
        u1_cart = await carts.get_by_user("u1")
        assert u1_cart.items == [CartLineItem(2, 1)]
        assert u1_cart.updated_at == 50
        assert (await carts.get_by_user("u2")).updated_at == 0
        assert (await wishlists.get_by_user("u1")).product_ids == [2]

    async def test_unknown_product_rejected(self):
        handler = DeleteProductHandler(
            FakeProductRepository(), FakeCartRepository(), FakeWishlistRepository()
        )
        with pytest.raises(EntityNotFoundError):
            await handler.handle(1)
