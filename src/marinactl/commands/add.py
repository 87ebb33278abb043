"""Command: add a boat from a CSV-shaped line."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from marinactl.commands._base import MarinaCommand

if TYPE_CHECKING:
    from marinactl.commands._context import AppContext


@click.command(
    cls=MarinaCommand,
    examples="""\
  marinactl -f boats.csv add "Rascal,23,slip,7,0.00"
  marinactl -f boats.csv add "Big Brother,20,land,B,120.00"
  marinactl -f boats.csv add "Moby,28,trailor,ABC123,0"
  marinactl -f boats.csv add "Dinghy,10,storage,42,35.50" """,
)
@click.argument("line")
@click.pass_obj
def add(app: AppContext, line: str) -> None:
    """Add a boat given as NAME,LENGTH,CATEGORY,LOCATION,BALANCE and save."""
    from marinactl.services.records import RecordService

    app.commit(RecordService(app.store).add(line))
