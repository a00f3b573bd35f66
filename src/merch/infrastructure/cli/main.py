import click

from merch.infrastructure.cli.catalog_commands import (
    catalog_resume,
    catalog_status,
    catalog_suspend,
)
from merch.infrastructure.cli.product_commands import product_add, product_list
from merch.infrastructure.config import configure_logging, get_settings


@click.group()
def cli() -> None:
    """merch — Merchandise catalog"""
    configure_logging(get_settings().environment)


@cli.group()
def product() -> None:
    """Manage products."""


@cli.group()
def catalog() -> None:
    """Manage the catalog state."""


# Register subcommands
product.add_command(product_add)
product.add_command(product_list)
catalog.add_command(catalog_status)
catalog.add_command(catalog_suspend)
catalog.add_command(catalog_resume)
