"""CLI commands for the Product aggregate."""

from __future__ import annotations

import asyncio

import click

from shopfront.application.add_product import AddProductHandler
from shopfront.application.delete_product import DeleteProductHandler
from shopfront.application.dto import ProductSpec
from shopfront.domain.exceptions import DomainException
from shopfront.infrastructure.bootstrap import Container


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--category", required=True, help="Product category.")
@click.option("--price", required=True, type=float, help="Price (e.g. 15.00).")
@click.option("--quantity", required=True, type=int, help="Units in stock.")
@click.option("--description", default=None, help="Free-text description.")
@click.option("--image", default=None, help="Image URL.")
@click.pass_obj
def product_add(
    container: Container,
    name: str,
    category: str,
    price: float,
    quantity: int,
    description: str | None,
    image: str | None,
) -> None:
    """Add a new product to the catalog."""
    handler = AddProductHandler(product_repo=container.products)
    spec = ProductSpec(
        name=name,
        category=category,
        price=price,
        quantity=quantity,
        description=description,
        image=image,
    )

    try:
        product = asyncio.run(handler.handle(spec))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(
        f"Product #{product.id} '{product.name}' added at ${product.price:.2f} "
        f"({product.inventory_status.value})"
    )


@click.command("list")
@click.pass_obj
def product_list(container: Container) -> None:
    """List all products in the catalog."""
    try:
        products = asyncio.run(container.products.list_all())
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Name':<20} {'Price':>10} {'Qty':>6}  {'Status':<10}")
    click.echo("-" * 56)
    for p in products:
        click.echo(
            f"{p.id:<6} {p.name:<20} {'$' + format(p.price, '.2f'):>10} "
            f"{p.quantity:>6}  {p.inventory_status.value:<10}"
        )


@click.command("delete")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.pass_obj
def product_delete(container: Container, product_id: int) -> None:
    """Delete a product and drop it from every cart and wishlist."""
    handler = DeleteProductHandler(
        product_repo=container.products,
        cart_repo=container.carts,
        wishlist_repo=container.wishlists,
    )

    try:
        asyncio.run(handler.handle(product_id))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product_id} deleted")
