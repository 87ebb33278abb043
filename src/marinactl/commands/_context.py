"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Provides lazy RecordStore initialization and
centralized result emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from marinactl.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from marinactl.config.settings import MarinaSettings
    from marinactl.infrastructure.store import RecordStore
    from marinactl.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    Subcommands access it via ``@click.pass_obj``.  The store is lazily
    initialized on first use so ``--help`` and ``--version`` never
    need a data file.
    """

    def __init__(self, settings: MarinaSettings) -> None:
        self.settings = settings
        self._store: RecordStore | None = None

        from marinactl.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def store(self) -> RecordStore:
        """The record store (created lazily on first access).

        Raises:
            click.UsageError: No data file was given or configured.
        """
        if self._store is None:
            if self.settings.data_file is None:
                msg = "No data file. Pass --file or set [store] path in marinactl.toml."
                raise click.UsageError(msg)

            from marinactl.infrastructure.store import RecordStore

            self._store = RecordStore.from_settings(self.settings)
        return self._store

    @property
    def output_settings(self) -> OutputSettings:
        return OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )

    def report(self, result: ServiceResult) -> None:
        """Write a ServiceResult without ending the process.

        Success goes to stdout, failure to stderr.  Warnings go to stderr
        so they don't pollute piped output (in JSON mode they are already
        in the serialized payload).
        """
        settings = self.output_settings
        output = format_result(result, settings=settings)
        click.echo(output, err=not result.ok)
        if not settings.json_output:
            for warning in result.warnings:
                click.echo(f"WARNING: {warning}", err=True)

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
        * Failure: writes to stderr, exits with code 1.
        """
        self.report(result)
        if not result.ok:
            raise SystemExit(1)

    def commit(self, result: ServiceResult) -> None:
        """Emit a mutation result and, if it succeeded, save the store.

        A failed save is emitted on its own and exits with code 1.
        """
        self.emit(result)

        from marinactl.services.store import StoreService

        saved = StoreService(self.store).save()
        if not saved.ok:
            self.emit(saved)
