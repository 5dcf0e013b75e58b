import click
from dotenv import load_dotenv

from shopfront.infrastructure.bootstrap import build_container
from shopfront.infrastructure.cli.product_commands import (
    product_add,
    product_delete,
    product_list,
)
from shopfront.infrastructure.cli.serve_command import serve
from shopfront.infrastructure.config import Settings
from shopfront.infrastructure.logging_setup import configure_logging


@click.group()
@click.pass_context
def cli(ctx: click.Context) -> None:
    """Shopfront: JSON-file-backed e-commerce API"""
    if ctx.obj is None:
        load_dotenv()
        settings = Settings.from_env()
        configure_logging(settings.log_level)
        ctx.obj = build_container(settings)


@cli.group()
def product() -> None:
    """Manage the product catalog."""


# Register subcommands
cli.add_command(serve)
product.add_command(product_add)
product.add_command(product_delete)
product.add_command(product_list)
