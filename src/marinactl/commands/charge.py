"""Command: apply one month of fees to every boat."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from marinactl.commands._base import MarinaCommand

if TYPE_CHECKING:
    from marinactl.commands._context import AppContext


@click.command(
    cls=MarinaCommand,
    examples="""\
  marinactl -f boats.csv charge
  marinactl -f boats.csv --json charge""",
)
@click.pass_obj
def charge(app: AppContext) -> None:
    """Apply monthly charges to every boat and save.

    Each run is one billing cycle: running it twice charges twice.
    """
    from marinactl.services.billing import BillingService

    app.commit(BillingService(app.store).apply_monthly_fees())
