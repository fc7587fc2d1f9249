"""CLI commands for the watch and component catalog."""

from __future__ import annotations

import click

from watchstore.application.add_product import AddComponentHandler, AddWatchHandler
from watchstore.application.update_price import UpdatePriceHandler
from watchstore.domain.exceptions import DomainException
from watchstore.domain.model.catalog import ComponentType
from watchstore.domain.model.value_objects import ProductRef
from watchstore.infrastructure.cli.context import CliContext, pass_context


@click.command("add")
@click.option("--name", required=True, help="Watch name.")
@click.option("--reference", required=True, help="Unique reference code.")
@click.option("--price", required=True, help="Price (e.g. 249.00).")
@click.option("--stock", required=True, type=int, help="Initial stock.")
@click.option("--description", default="", help="Free-text description.")
@click.option("--category", "category_id", default=None, help="Category ID.")
@pass_context
def watch_add(
    ctx: CliContext,
    name: str,
    reference: str,
    price: str,
    stock: int,
    description: str,
    category_id: str | None,
) -> None:
    """Add a new watch to the catalog."""
    handler = AddWatchHandler(ctx.uow_factory)

    try:
        watch = handler.handle(
            ctx.caller,
            name=name,
            reference=reference,
            price=price,
            stock=stock,
            description=description,
            category_id=category_id,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Watch {watch.id} '{watch.name}' added at {watch.price} (stock {watch.stock})")


@click.command("list")
@pass_context
def watch_list(ctx: CliContext) -> None:
    """List all watches in the catalog."""
    with ctx.uow_factory() as uow:
        watches = uow.watches.list_all()

    if not watches:
        click.echo("No watches found.")
        return

    click.echo(f"{'ID':<36}  {'Reference':<12} {'Name':<24} {'Price':>10} {'Stock':>6}")
    click.echo("-" * 94)
    for w in watches:
        click.echo(
            f"{w.id:<36}  {w.reference:<12} {w.name:<24} {str(w.price):>10} {w.stock:>6}"
        )


@click.command("price")
@click.option("--id", "watch_id", required=True, help="Watch ID.")
@click.option("--price", required=True, help="New price (e.g. 299.00).")
@pass_context
def watch_price(ctx: CliContext, watch_id: str, price: str) -> None:
    """Update a watch's catalog price."""
    handler = UpdatePriceHandler(ctx.uow_factory)

    try:
        handler.handle(ctx.caller, ProductRef.watch(watch_id), price)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Watch {watch_id} price updated to €{price}")


@click.command("add")
@click.option("--name", required=True, help="Component name.")
@click.option(
    "--type",
    "type_",
    required=True,
    type=click.Choice([t.value for t in ComponentType], case_sensitive=False),
    help="Component type.",
)
@click.option("--price", required=True, help="Price (e.g. 45.00).")
@click.option("--stock", required=True, type=int, help="Initial stock.")
@pass_context
def component_add(ctx: CliContext, name: str, type_: str, price: str, stock: int) -> None:
    """Add a new component to the catalog."""
    handler = AddComponentHandler(ctx.uow_factory)

    try:
        component = handler.handle(ctx.caller, name=name, type=type_, price=price, stock=stock)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(
        f"Component {component.id} '{component.name}' ({component.type.value}) "
        f"added at {component.price} (stock {component.stock})"
    )


@click.command("list")
@click.option(
    "--type",
    "type_",
    default=None,
    type=click.Choice([t.value for t in ComponentType], case_sensitive=False),
    help="Only list components of this type.",
)
@pass_context
def component_list(ctx: CliContext, type_: str | None) -> None:
    """List components, optionally of one type."""
    component_type = ComponentType.parse(type_) if type_ else None
    with ctx.uow_factory() as uow:
        components = uow.components.list_all(component_type)

    if not components:
        click.echo("No components found.")
        return

    click.echo(f"{'ID':<36}  {'Type':<9} {'Name':<24} {'Price':>10} {'Stock':>6}")
    click.echo("-" * 91)
    for c in components:
        click.echo(
            f"{c.id:<36}  {c.type.value:<9} {c.name:<24} {str(c.price):>10} {c.stock:>6}"
        )


@click.command("price")
@click.option("--id", "component_id", required=True, help="Component ID.")
@click.option("--price", required=True, help="New price (e.g. 55.00).")
@pass_context
def component_price(ctx: CliContext, component_id: str, price: str) -> None:
    """Update a component's catalog price."""
    handler = UpdatePriceHandler(ctx.uow_factory)

    try:
        handler.handle(ctx.caller, ProductRef.component(component_id), price)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Component {component_id} price updated to €{price}")
