"""Unit tests for the Product aggregate."""

import re

import pytest

from shopfront.domain.exceptions import ValidationError
from shopfront.domain.model.product import InventoryStatus, Product


def _create(**overrides) -> Product:
    fields = dict(product_id=1, name="Widget", category="tools", price=9.5, quantity=3, at=1_000)
    fields.update(overrides)
    return Product.create(**fields)


class TestProductCreate:

    def test_generated_fields(self):
        product = _create()
        assert re.fullmatch(r"PROD-[0-9A-F]{12}", product.code)
        assert re.fullmatch(r"REF-[0-9a-z]{9}", product.internal_reference)
        assert 0 <= product.shell_id < 1000
        assert product.rating == 0
        assert product.created_at == product.updated_at == 1_000

    def test_codes_differ_between_products(self):
        assert _create().code != _create().code

    def test_in_stock_when_quantity_positive(self):
        assert _create(quantity=1).inventory_status is InventoryStatus.INSTOCK

    def test_out_of_stock_when_quantity_zero(self):
        assert _create(quantity=0).inventory_status is InventoryStatus.OUTOFSTOCK

    def test_free_product_allowed(self):
        assert _create(price=0).price == 0

    def test_negative_price_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            _create(price=-1)

    @pytest.mark.parametrize("price", [float("inf"), float("-inf"), float("nan")])
    def test_non_finite_price_rejected(self, price):
        with pytest.raises(ValidationError, match="finite"):
            _create(price=price)

    def test_negative_quantity_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            _create(quantity=-1)

    def test_blank_name_rejected(self):
        with pytest.raises(ValidationError, match="name is required"):
            _create(name="  ")


class TestProductApplyChanges:

    def test_partial_update_keeps_other_fields(self):
        product = _create()
        product.apply_changes(price=20.0, at=2_000)
        assert product.price == 20.0
        assert product.name == "Widget"
        assert product.updated_at == 2_000
        assert product.created_at == 1_000

    def test_status_follows_new_quantity(self):
        product = _create(quantity=3)
        product.apply_changes(quantity=0)
        assert product.inventory_status is InventoryStatus.OUTOFSTOCK

    def test_status_unchanged_when_quantity_not_given(self):
        product = _create(quantity=3)
        product.apply_changes(name="Renamed")
        assert product.inventory_status is InventoryStatus.INSTOCK

    def test_invalid_change_rejected(self):
        with pytest.raises(ValidationError):
            _create().apply_changes(price=-5)

    def test_infinite_price_change_rejected(self):
        product = _create()
        with pytest.raises(ValidationError, match="finite"):
            product.apply_changes(price=float("inf"))
        assert product.price == 9.5
