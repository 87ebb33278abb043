"""Subcommand modules for marinactl.

Provides register_commands() which uses deferred imports to keep
``marinactl --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from marinactl.commands.add import add
    from marinactl.commands.charge import charge
    from marinactl.commands.inventory import inventory
    from marinactl.commands.pay import pay
    from marinactl.commands.remove import remove
    from marinactl.commands.shell import shell

    cli.add_command(inventory)
    cli.add_command(add)
    cli.add_command(remove)
    cli.add_command(pay)
    cli.add_command(charge)
    cli.add_command(shell)
