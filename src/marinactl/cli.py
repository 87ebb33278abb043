"""Root CLI group for marinactl with global flags and command registration."""

from __future__ import annotations

import click

from marinactl import __version__
from marinactl.commands import register_commands
from marinactl.commands._base import MarinaGroup
from marinactl.commands._context import AppContext
from marinactl.config.settings import MarinaSettings


@click.group(
    cls=MarinaGroup,
    invoke_without_command=True,
    examples="""\
  marinactl -f boats.csv inventory
  marinactl -f boats.csv add "Rascal,23,slip,7,0"
  marinactl -f boats.csv charge
  marinactl -f boats.csv shell""",
)
@click.version_option(version=__version__, prog_name="marinactl")
@click.option(
    "-f",
    "--file",
    "data_file",
    default=None,
    type=click.Path(dir_okay=False),
    help="Boat data file (CSV). Overrides [store] path.",
)
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug info.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.pass_context
def cli(
    ctx: click.Context,
    data_file: str | None,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
) -> None:
    """marinactl — marina boat registry and billing."""
    ctx.ensure_object(dict)
    settings = MarinaSettings.from_cli(
        config_path=config_path,
        file=data_file,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
