"""Integration tests for the wishlist use cases."""

import pytest

from shopfront.application.add_wishlist_item import AddWishlistItemHandler
from shopfront.application.remove_wishlist_item import RemoveWishlistItemHandler
from shopfront.application.show_wishlist import ShowWishlistHandler
from shopfront.domain.exceptions import EntityNotFoundError
from tests.fakes import FakeProductRepository, FakeWishlistRepository, make_product


def _setup():
    return FakeWishlistRepository(), FakeProductRepository([make_product(1), make_product(2)])


class TestAddWishlistItem:

    async def test_add_twice_keeps_one_entry(self):
        wishlists, products = _setup()
        handler = AddWishlistItemHandler(wishlists, products)

        await handler.handle("u1", 1)
        wishlist = await handler.handle("u1", 1)

        assert wishlist.product_ids == [1]

    async def test_missing_product_rejected(self):
        wishlists, products = _setup()
        with pytest.raises(EntityNotFoundError):
            await AddWishlistItemHandler(wishlists, products).handle("u1", 3)
        assert wishlists.writes == 0


class TestRemoveWishlistItem:

    async def test_remove_absent_id_succeeds_and_retimestamps(self):
        wishlists, products = _setup()
        await AddWishlistItemHandler(wishlists, products, clock=lambda: 1).handle("u1", 1)

        wishlist = await RemoveWishlistItemHandler(wishlists, clock=lambda: 2).handle("u1", 2)

        assert wishlist.product_ids == [1]
        assert wishlist.updated_at == 2

    async def test_remove_present_id(self):
        wishlists, products = _setup()
        await AddWishlistItemHandler(wishlists, products).handle("u1", 1)
        wishlist = await RemoveWishlistItemHandler(wishlists).handle("u1", 1)
        assert wishlist.product_ids == []


class TestShowWishlist:

    async def test_absent_wishlist_is_empty(self):
        wishlists, _ = _setup()
        wishlist = await ShowWishlistHandler(wishlists).handle("u1")
        assert wishlist.product_ids == []
        assert await wishlists.get_by_user("u1") is None
