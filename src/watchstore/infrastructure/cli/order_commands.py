"""CLI commands for the Order aggregate."""

from __future__ import annotations

import click

from watchstore.application.create_order import CreateOrderHandler
from watchstore.application.dto import CreateOrderRequest, OrderDTO, OrderLineRequest
from watchstore.application.set_order_status import SetOrderStatusHandler
from watchstore.application.show_order import ListOrdersHandler, ShowOrderHandler
from watchstore.domain.exceptions import DomainException
from watchstore.domain.model.order import OrderStatus
from watchstore.infrastructure.cli.context import CliContext, pass_context

_LINE_KINDS = ("watch", "custom")


def _parse_items(raw: str) -> list[OrderLineRequest]:
    """Parse 'watch:<id>:2,custom:<id>:1' into OrderLineRequest list."""
    lines: list[OrderLineRequest] = []
    for part in raw.split(","):
        part = part.strip()
        pieces = part.split(":")
        if len(pieces) != 3 or pieces[0].lower() not in _LINE_KINDS:
            raise click.BadParameter(
                f"Invalid item format '{part}'. Expected 'watch:ID:Qty' or 'custom:ID:Qty'."
            )
        kind, product_id, qty_str = pieces
        try:
            qty = int(qty_str)
        except ValueError:
            raise click.BadParameter(
                f"Invalid quantity '{qty_str}' for {kind} '{product_id}'."
            )
        if kind.lower() == "watch":
            lines.append(OrderLineRequest(watch_id=product_id.strip(), quantity=qty))
        else:
            lines.append(OrderLineRequest(custom_watch_id=product_id.strip(), quantity=qty))
    return lines


def _display_order(dto: OrderDTO) -> None:
    """Shared formatting for displaying an order."""
    click.echo(f"Order #{dto.id}  (status={dto.status})")
    click.echo(f"Customer: {dto.user_id}")
    click.echo(f"Created:  {dto.created_at}")
    click.echo()
    click.echo(f"  {'Product':<24} {'Kind':<7} {'Qty':>5} {'Price':>10} {'Total':>11}")
    click.echo(f"  {'-'*61}")
    for item in dto.items:
        kind = "custom" if item.is_custom else "watch"
        click.echo(
            f"  {item.product_name:<24} {kind:<7} {item.quantity:>5} "
            f"{item.unit_price:>10} {item.line_total:>11}"
        )
        for component in item.components:
            click.echo(f"      {component.type:<9} {component.name:<24} {component.price:>10}")
    click.echo(f"  {'-'*61}")
    click.echo(f"  {'Order Total':<38} {dto.total:>22}")


@click.command("create")
@click.option(
    "--items", required=True, help="Items as 'watch:ID:Qty,custom:ID:Qty'."
)
@pass_context
def order_create(ctx: CliContext, items: str) -> None:
    """Place a new order."""
    request = CreateOrderRequest(items=_parse_items(items))
    handler = CreateOrderHandler(ctx.uow_factory)

    try:
        dto = handler.handle(ctx.caller, request)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo("Order created.")
    _display_order(dto)


@click.command("show")
@click.option("--id", "order_id", required=True, help="Order ID to display.")
@pass_context
def order_show(ctx: CliContext, order_id: str) -> None:
    """Show details of an existing order."""
    handler = ShowOrderHandler(ctx.uow_factory)

    try:
        dto = handler.handle(ctx.caller, order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_order(dto)


@click.command("list")
@click.option(
    "--status",
    default=None,
    type=click.Choice([s.value for s in OrderStatus], case_sensitive=False),
    help="Only list orders in this status.",
)
@pass_context
def order_list(ctx: CliContext, status: str | None) -> None:
    """List your orders (all orders with --admin)."""
    handler = ListOrdersHandler(ctx.uow_factory)

    try:
        orders = handler.handle(ctx.caller, status=status)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not orders:
        click.echo("No orders found.")
        return

    click.echo(f"{'ID':<36}  {'Customer':<16} {'Status':<11} {'Items':>5} {'Total':>12}  Created")
    click.echo("-" * 106)
    for dto in orders:
        click.echo(
            f"{dto.id:<36}  {dto.user_id:<16} {dto.status:<11} {len(dto.items):>5} "
            f"{dto.total:>12}  {dto.created_at}"
        )


@click.command("status")
@click.option("--id", "order_id", required=True, help="Order ID.")
@click.option("--status", "new_status", required=True, help="New status (e.g. SHIPPED).")
@pass_context
def order_status(ctx: CliContext, order_id: str, new_status: str) -> None:
    """Change an order's status (admin only; CANCELLED restocks watches)."""
    handler = SetOrderStatusHandler(ctx.uow_factory)

    try:
        ctx.caller.require_admin()
        target = OrderStatus.parse(new_status)
        previous = ShowOrderHandler(ctx.uow_factory).handle(ctx.caller, order_id).status
        dto = handler.handle(ctx.caller, order_id, target)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if previous == dto.status:
        click.echo(f"Order #{order_id} is already {dto.status}; nothing changed.")
    elif dto.status == OrderStatus.CANCELLED.value:
        click.echo(f"Order #{order_id} cancelled, watch stock restored.")
    else:
        click.echo(f"Order #{order_id} is now {dto.status}.")
