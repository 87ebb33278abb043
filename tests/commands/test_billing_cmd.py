"""Tests for the pay and charge CLI commands."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from marinactl.cli import cli
from marinactl.infrastructure.store import load_registry


def _balance(path: Path, name: str) -> float:
    record = load_registry(path).find(name)
    assert record is not None
    return record.balance


@pytest.mark.usefixtures("_isolated_cwd")
class TestPayCommand:
    def test_pay_saves(self, cli_runner: CliRunner, data_file: Path) -> None:
        result = cli_runner.invoke(cli, ["--json", "-f", str(data_file), "pay", "rascal", "100"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["data"]["balance"] == 400.0
        assert _balance(data_file, "Rascal") == 400.0

    def test_pay_exact_balance(self, cli_runner: CliRunner, data_file: Path) -> None:
        result = cli_runner.invoke(cli, ["-f", str(data_file), "pay", "Rascal", "500.00"])
        assert result.exit_code == 0
        assert _balance(data_file, "Rascal") == 0.0
        assert "Rascal,23,slip,7,0.00" in data_file.read_text(encoding="utf-8")

    def test_pay_over_balance(self, cli_runner: CliRunner, data_file: Path) -> None:
        result = cli_runner.invoke(cli, ["-f", str(data_file), "pay", "Rascal", "500.01"])
        assert result.exit_code == 1
        assert "amount owed for Rascal: $500.00" in result.output
        assert _balance(data_file, "Rascal") == 500.0

    def test_pay_unknown(self, cli_runner: CliRunner, data_file: Path) -> None:
        result = cli_runner.invoke(cli, ["-f", str(data_file), "pay", "Titanic", "1"])
        assert result.exit_code == 1
        assert "No boat with that name" in result.output

    def test_pay_negative_amount(self, cli_runner: CliRunner, data_file: Path) -> None:
        result = cli_runner.invoke(cli, ["-f", str(data_file), "pay", "Moby", "-25"])
        assert result.exit_code == 0, result.output
        assert _balance(data_file, "Moby") == 25.0

    def test_pay_requires_number(self, cli_runner: CliRunner, data_file: Path) -> None:
        result = cli_runner.invoke(cli, ["-f", str(data_file), "pay", "Rascal", "lots"])
        assert result.exit_code == 2


@pytest.mark.usefixtures("_isolated_cwd")
class TestChargeCommand:
    def test_charge_saves(self, cli_runner: CliRunner, data_file: Path) -> None:
        result = cli_runner.invoke(cli, ["-f", str(data_file), "charge"])
        assert result.exit_code == 0
        assert "total_charged" in result.output
        assert _balance(data_file, "Moby") == pytest.approx(700.0)
        assert _balance(data_file, "big brother") == pytest.approx(400.0)

    def test_charge_twice_doubles(self, cli_runner: CliRunner, data_file: Path) -> None:
        cli_runner.invoke(cli, ["-f", str(data_file), "charge"])
        cli_runner.invoke(cli, ["-f", str(data_file), "charge"])
        assert _balance(data_file, "Rascal") == pytest.approx(500.0 + 2 * 287.5)
