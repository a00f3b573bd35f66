"""CLI commands for the merchandise catalog state."""

from __future__ import annotations

import click

from merch.application.show_merchandise import ShowMerchandiseHandler
from merch.application.suspend_merchandise import (
    ResumeMerchandiseHandler,
    SuspendMerchandiseHandler,
)
from merch.domain.exceptions import DomainException
from merch.infrastructure.bootstrap import merchandise_repository


@click.command("status")
def catalog_status() -> None:
    """Show whether the catalog accepts new products."""
    repo = merchandise_repository()
    dto = ShowMerchandiseHandler(merchandise_repo=repo, read_model=repo).handle()

    click.echo(f"State:    {dto.state}")
    click.echo(f"Products: {dto.product_count}")
    if dto.suspended_reason is not None:
        click.echo(f"Reason:   {dto.suspended_reason}")


@click.command("suspend")
@click.option("--reason", required=True, help="Why intake is suspended.")
def catalog_suspend(reason: str) -> None:
    """Stop accepting new products."""
    handler = SuspendMerchandiseHandler(merchandise_repo=merchandise_repository())

    try:
        outcome = handler.handle(reason)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if outcome.is_err():
        raise click.ClickException(outcome.error.message)

    click.echo(f"Catalog suspended: {outcome.unwrap().reason}")


@click.command("resume")
def catalog_resume() -> None:
    """Accept new products again."""
    handler = ResumeMerchandiseHandler(merchandise_repo=merchandise_repository())

    try:
        outcome = handler.handle()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if outcome.is_err():
        raise click.ClickException(outcome.error.message)

    click.echo("Catalog resumed.")
