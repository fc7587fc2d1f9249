"""CLI commands for custom watches."""

from __future__ import annotations

import click

from watchstore.application.assemble_custom_watch import AssembleCustomWatchHandler
from watchstore.application.dto import AssembleCustomWatchRequest, CustomWatchDTO
from watchstore.application.show_custom_watch import (
    ListCustomWatchesHandler,
    ShowCustomWatchHandler,
)
from watchstore.domain.exceptions import DomainException
from watchstore.infrastructure.cli.context import CliContext, pass_context


def _display_custom_watch(dto: CustomWatchDTO) -> None:
    click.echo(f"Custom watch {dto.id}  '{dto.name}'")
    click.echo(f"Created: {dto.created_at}")
    click.echo()
    click.echo(f"  {'Type':<9} {'Component':<24} {'Price':>10}")
    click.echo(f"  {'-'*45}")
    for component in dto.components:
        click.echo(f"  {component.type:<9} {component.name:<24} {component.price:>10}")
    click.echo(f"  {'-'*45}")
    click.echo(f"  {'Total':<34} {dto.total_price:>10}")


@click.command("assemble")
@click.option("--name", required=True, help="Display name for the custom watch.")
@click.option("--components", required=True, help="Component IDs, comma separated.")
@pass_context
def custom_assemble(ctx: CliContext, name: str, components: str) -> None:
    """Assemble a custom watch from components."""
    request = AssembleCustomWatchRequest(
        name=name, component_ids=[c.strip() for c in components.split(",") if c.strip()]
    )
    handler = AssembleCustomWatchHandler(ctx.uow_factory)

    try:
        dto = handler.handle(ctx.caller, request)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo("Custom watch assembled.")
    _display_custom_watch(dto)


@click.command("list")
@pass_context
def custom_list(ctx: CliContext) -> None:
    """List your custom watches."""
    custom_watches = ListCustomWatchesHandler(ctx.uow_factory).handle(ctx.caller)

    if not custom_watches:
        click.echo("No custom watches found.")
        return

    for dto in custom_watches:
        click.echo(
            f"{dto.id}  {dto.name:<24} {dto.total_price:>10}  "
            f"({len(dto.components)} components)"
        )


@click.command("show")
@click.option("--id", "custom_watch_id", required=True, help="Custom watch ID.")
@pass_context
def custom_show(ctx: CliContext, custom_watch_id: str) -> None:
    """Show one of your custom watches."""
    handler = ShowCustomWatchHandler(ctx.uow_factory)

    try:
        dto = handler.handle(ctx.caller, custom_watch_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_custom_watch(dto)
