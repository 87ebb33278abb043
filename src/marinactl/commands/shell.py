"""Command: interactive menu over one loaded registry.

The registry is loaded once, changed in memory by each menu action, and
written back only when the user chooses ``X``. End of input aborts
without saving.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from marinactl.commands._base import MarinaCommand

if TYPE_CHECKING:
    from marinactl.commands._context import AppContext

MENU = """\

Menu:
I - Inventory
A - Add Boat
R - Remove Boat
P - Payment
M - Apply Monthly Charges
X - Exit"""


@click.command(
    cls=MarinaCommand,
    examples="""\
  marinactl -f boats.csv shell
  printf 'i\\nm\\nx\\n' | marinactl -f boats.csv shell""",
)
@click.pass_obj
def shell(app: AppContext) -> None:
    """Run the interactive menu; changes are saved on exit (X)."""
    from marinactl.services.billing import BillingService
    from marinactl.services.inventory import InventoryService
    from marinactl.services.records import RecordService
    from marinactl.services.store import StoreService

    store = app.store
    warning = store.take_load_warning()
    if warning:
        click.echo(f"WARNING: {warning}", err=True)

    while True:
        click.echo(MENU)
        choice = click.prompt("Enter choice", default="", show_default=False)
        op = choice.strip()[:1].lower()

        if op == "i":
            app.report(InventoryService(store).list_records())
        elif op == "a":
            line = click.prompt("Enter boat data (CSV format)")
            app.report(RecordService(store).add(line))
        elif op == "r":
            name = click.prompt("Enter boat name to remove")
            app.report(RecordService(store).remove(name))
        elif op == "p":
            name = click.prompt("Enter boat name")
            found = InventoryService(store).find(name)
            if not found.ok:
                app.report(found)
                continue
            amount = click.prompt("Enter payment amount", type=float)
            app.report(BillingService(store).accept_payment(name, amount))
        elif op == "m":
            app.report(BillingService(store).apply_monthly_fees())
        elif op == "x":
            app.emit(StoreService(store).save())
            return
        else:
            click.echo("Invalid option.")
