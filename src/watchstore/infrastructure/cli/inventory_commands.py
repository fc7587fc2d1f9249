"""CLI commands for stock levels."""

from __future__ import annotations

import click

from watchstore.application.show_inventory import LowStockReportHandler, ShowStockHandler
from watchstore.domain.exceptions import DomainException
from watchstore.domain.model.value_objects import ProductRef
from watchstore.infrastructure.cli.context import CliContext, pass_context


@click.command("show")
@click.option("--watch", "watch_id", default=None, help="Watch ID.")
@click.option("--component", "component_id", default=None, help="Component ID.")
@pass_context
def inventory_show(ctx: CliContext, watch_id: str | None, component_id: str | None) -> None:
    """Show current price and stock of a watch or component."""
    if (watch_id is None) == (component_id is None):
        raise click.UsageError("Pass exactly one of --watch or --component.")
    ref = ProductRef.watch(watch_id) if watch_id else ProductRef.component(component_id)  # type: ignore[arg-type]

    try:
        dto = ShowStockHandler(ctx.uow_factory).handle(ref)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"{dto.kind.lower()} {dto.id}  '{dto.name}'  price={dto.price}  stock={dto.stock}")


@click.command("low-stock")
@pass_context
def inventory_low_stock(ctx: CliContext) -> None:
    """List watches and components that need restocking (admin only)."""
    handler = LowStockReportHandler(
        ctx.uow_factory,
        watch_threshold=ctx.settings.low_stock_watch_threshold,
        component_threshold=ctx.settings.low_stock_component_threshold,
    )

    try:
        lines = handler.handle(ctx.caller)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not lines:
        click.echo("All stock levels are above their thresholds.")
        return

    click.echo(f"{'Kind':<10} {'Name':<24} {'Stock':>6} {'Threshold':>10}")
    click.echo("-" * 53)
    for line in lines:
        click.echo(f"{line.kind:<10} {line.name:<24} {line.stock:>6} {line.threshold:>10}")
