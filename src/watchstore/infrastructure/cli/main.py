import click

from watchstore.application.dto import Caller, Role
from watchstore.config import Settings
from watchstore.infrastructure.bootstrap import engine_for
from watchstore.infrastructure.cli.context import CliContext
from watchstore.infrastructure.cli.custom_commands import (
    custom_assemble,
    custom_list,
    custom_show,
)
from watchstore.infrastructure.cli.inventory_commands import (
    inventory_low_stock,
    inventory_show,
)
from watchstore.infrastructure.cli.order_commands import (
    order_create,
    order_list,
    order_show,
    order_status,
)
from watchstore.infrastructure.cli.watch_commands import (
    component_add,
    component_list,
    component_price,
    watch_add,
    watch_list,
    watch_price,
)
from watchstore.logging_config import configure_logging


@click.group()
@click.option(
    "--user",
    "user_id",
    envvar="WATCHSTORE_USER",
    default="guest",
    show_default=True,
    help="ID of the user the command runs as.",
)
@click.option("--admin", is_flag=True, default=False, help="Run with the administrator role.")
@click.pass_context
def cli(ctx: click.Context, user_id: str, admin: bool) -> None:
    """Watchstore: watches, custom watches and orders."""
    settings = Settings.from_env()
    configure_logging(settings.log_level)
    ctx.obj = CliContext(
        caller=Caller(user_id=user_id, role=Role.ADMIN if admin else Role.USER),
        settings=settings,
    )


@cli.group()
def watch() -> None:
    """Manage the watch catalog."""


@cli.group()
def component() -> None:
    """Manage the component catalog."""


@cli.group()
def custom() -> None:
    """Assemble and view custom watches."""


@cli.group()
def order() -> None:
    """Manage orders."""


@cli.group()
def inventory() -> None:
    """Inspect stock levels."""


@cli.group()
def db() -> None:
    """Database maintenance."""


@db.command("init")
@click.pass_obj
def db_init(obj: CliContext) -> None:
    """Create the database tables."""
    engine_for(obj.settings)
    click.echo(f"Database ready at {obj.settings.database_url}")


# Register subcommands
watch.add_command(watch_add)
watch.add_command(watch_list)
watch.add_command(watch_price)
component.add_command(component_add)
component.add_command(component_list)
component.add_command(component_price)
custom.add_command(custom_assemble)
custom.add_command(custom_list)
custom.add_command(custom_show)
order.add_command(order_create)
order.add_command(order_list)
order.add_command(order_show)
order.add_command(order_status)
inventory.add_command(inventory_show)
inventory.add_command(inventory_low_stock)
