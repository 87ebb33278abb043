"""Command: remove a boat by name."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from marinactl.commands._base import MarinaCommand

if TYPE_CHECKING:
    from marinactl.commands._context import AppContext


@click.command(
    cls=MarinaCommand,
    examples="""\
  marinactl -f boats.csv remove Rascal
  marinactl -f boats.csv remove "big brother" """,
)
@click.argument("name")
@click.pass_obj
def remove(app: AppContext, name: str) -> None:
    """Remove the boat called NAME (case-insensitive) and save."""
    from marinactl.services.records import RecordService

    app.commit(RecordService(app.store).remove(name))
