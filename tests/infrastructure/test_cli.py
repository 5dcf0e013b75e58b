"""Tests for the click CLI against a temp data directory."""

import json

from click.testing import CliRunner

from shopfront.infrastructure.bootstrap import build_container
from shopfront.infrastructure.cli.main import cli
from shopfront.infrastructure.config import Settings


def _invoke(tmp_path, *args):
    container = build_container(Settings(data_dir=tmp_path, bcrypt_rounds=4))
    return CliRunner().invoke(cli, list(args), obj=container)


def _products(tmp_path):
    return json.loads((tmp_path / "products.json").read_text(encoding="utf-8"))


class TestProductCommands:

    def test_add_persists_product(self, tmp_path):
        result = _invoke(
            tmp_path, "product", "add",
            "--name", "Lamp", "--category", "home", "--price", "15", "--quantity", "3",
        )

        assert result.exit_code == 0, result.output
        assert "Product #1 'Lamp' added at $15.00 (INSTOCK)" in result.output
        [stored] = _products(tmp_path)
        assert stored["name"] == "Lamp"
        assert stored["quantity"] == 3

    def test_add_rejects_negative_price(self, tmp_path):
        result = _invoke(
            tmp_path, "product", "add",
            "--name", "Lamp", "--category", "home", "--price", "-1", "--quantity", "3",
        )

        assert result.exit_code != 0
        assert "Product price cannot be negative" in result.output
        assert _products(tmp_path) == []

    def test_list_empty(self, tmp_path):
        result = _invoke(tmp_path, "product", "list")
        assert result.exit_code == 0
        assert "No products found." in result.output

    def test_list_shows_products(self, tmp_path):
        _invoke(tmp_path, "product", "add", "--name", "Lamp", "--category", "home",
                "--price", "15", "--quantity", "0")

        result = _invoke(tmp_path, "product", "list")

        assert result.exit_code == 0
        assert "Lamp" in result.output
        assert "OUTOFSTOCK" in result.output

    def test_delete(self, tmp_path):
        _invoke(tmp_path, "product", "add", "--name", "Lamp", "--category", "home",
                "--price", "15", "--quantity", "3")

        result = _invoke(tmp_path, "product", "delete", "--id", "1")

        assert result.exit_code == 0
        assert "Product #1 deleted" in result.output
        assert _products(tmp_path) == []

    def test_delete_missing(self, tmp_path):
        result = _invoke(tmp_path, "product", "delete", "--id", "9")
        assert result.exit_code != 0
        assert "Product not found" in result.output
