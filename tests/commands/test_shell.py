"""Tests for the interactive shell command."""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner

from marinactl.cli import cli
from marinactl.infrastructure.store import load_registry


def _run(cli_runner: CliRunner, data_file: Path, keys: list[str]):
    return cli_runner.invoke(cli, ["-f", str(data_file), "shell"], input="\n".join(keys) + "\n")


@pytest.mark.usefixtures("_isolated_cwd")
class TestShellCommand:
    def test_menu_and_exit(self, cli_runner: CliRunner, data_file: Path) -> None:
        result = _run(cli_runner, data_file, ["x"])
        assert result.exit_code == 0
        assert "I - Inventory" in result.output
        assert "X - Exit" in result.output
        assert "save" in result.output

    def test_inventory(self, cli_runner: CliRunner, data_file: Path) -> None:
        result = _run(cli_runner, data_file, ["I", "x"])
        assert result.exit_code == 0
        assert "Boat Inventory" in result.output
        assert "Slip #7" in result.output

    def test_changes_saved_on_exit(self, cli_runner: CliRunner, data_file: Path) -> None:
        keys = [
            "a", "Anchor,15,land,c,0",
            "r", "dinghy",
            "m",
            "p", "Anchor", "210",
            "x",
        ]
        result = _run(cli_runner, data_file, keys)
        assert result.exit_code == 0

        registry = load_registry(data_file)
        assert [r.name for r in registry] == ["Anchor", "big brother", "Moby", "Rascal"]
        anchor = registry.find("anchor")
        assert anchor is not None
        assert anchor.balance == pytest.approx(0.0)

    def test_eof_aborts_without_saving(self, cli_runner: CliRunner, data_file: Path) -> None:
        before = data_file.read_text(encoding="utf-8")
        result = _run(cli_runner, data_file, ["m"])
        assert result.exit_code == 1
        assert data_file.read_text(encoding="utf-8") == before

    def test_errors_do_not_end_loop(self, cli_runner: CliRunner, data_file: Path) -> None:
        result = _run(cli_runner, data_file, ["r", "Titanic", "p", "Titanic", "z", "x"])
        assert result.exit_code == 0
        assert result.output.count("No boat with that name") == 2
        assert "Invalid option." in result.output

    def test_payment_over_balance_reports_owed(
        self, cli_runner: CliRunner, data_file: Path
    ) -> None:
        result = _run(cli_runner, data_file, ["p", "Rascal", "9999", "x"])
        assert result.exit_code == 0
        assert "amount owed for Rascal: $500.00" in result.output
        rascal = load_registry(data_file).find("Rascal")
        assert rascal is not None
        assert rascal.balance == 500.0

    def test_missing_file_starts_empty(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        path = tmp_path / "fresh.csv"
        result = _run(cli_runner, path, ["a", "Fresh,12,slip,4,0", "x"])
        assert result.exit_code == 0
        assert "Could not load data" in result.output
        assert path.read_text(encoding="utf-8") == "Fresh,12,slip,4,0.00\n"
