"""Command: list every boat in name order."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from marinactl.commands._base import MarinaCommand

if TYPE_CHECKING:
    from marinactl.commands._context import AppContext


@click.command(
    cls=MarinaCommand,
    examples="""\
  marinactl -f boats.csv inventory
  marinactl -f boats.csv --json inventory
  marinactl -f boats.csv -q inventory""",
)
@click.pass_obj
def inventory(app: AppContext) -> None:
    """List all boats with their location and amount owed."""
    from marinactl.services.inventory import InventoryService

    app.emit(InventoryService(app.store).list_records())
