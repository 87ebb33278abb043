"""Command: accept a payment against a boat's balance."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from marinactl.commands._base import MarinaCommand

if TYPE_CHECKING:
    from marinactl.commands._context import AppContext


@click.command(
    cls=MarinaCommand,
    context_settings={"ignore_unknown_options": True},
    examples="""\
  marinactl -f boats.csv pay Rascal 100
  marinactl -f boats.csv pay Moby -25
  marinactl -f boats.csv --json pay "big brother" 120.00""",
)
@click.argument("name")
@click.argument("amount", type=float)
@click.pass_obj
def pay(app: AppContext, name: str, amount: float) -> None:
    """Apply a payment of AMOUNT to the boat called NAME and save.

    Payments larger than the amount owed are rejected. A negative AMOUNT
    adds to the balance.
    """
    from marinactl.services.billing import BillingService

    app.commit(BillingService(app.store).accept_payment(name, amount))
