"""CLI commands for products in the merchandise catalog."""

from __future__ import annotations

import click

from merch.application.dto import AddProductRequest
from merch.application.show_merchandise import ListProductsHandler
from merch.domain.exceptions import DomainException
from merch.infrastructure.bootstrap import add_product_handler, merchandise_repository


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--description", required=True, help="Product description.")
@click.option("--category", required=True, help="Product category.")
def product_add(name: str, description: str, category: str) -> None:
    """Add a new product to the catalog."""
    handler = add_product_handler()
    request = AddProductRequest(name=name, description=description, category=category)

    try:
        outcome = handler.handle(request)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if outcome.is_err():
        raise click.ClickException(outcome.error.message)

    added = outcome.unwrap()
    click.echo(
        f"Product '{added.product.name}' added at position {added.display_order} "
        f"(id={added.product.id})"
    )


@click.command("list")
def product_list() -> None:
    """List all products in display order."""
    handler = ListProductsHandler(read_model=merchandise_repository())
    products = handler.handle()

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'#':>4}  {'Name':<20} {'Category':<15} {'Description'}")
    click.echo("-" * 60)
    for p in products:
        click.echo(f"{p.display_order:>4}  {p.name:<20} {p.category:<15} {p.description}")
