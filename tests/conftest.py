"""Shared pytest fixtures and test helpers for marinactl tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner

from marinactl.domain.records import (
    LandLocation,
    Location,
    Record,
    SlipLocation,
    StorageLocation,
    TrailerLocation,
)
from marinactl.infrastructure.store import RecordStore

SAMPLE_LINES = [
    "Rascal,23,slip,7,500.00",
    "big brother,20,land,B,120.00",
    "Moby,28,trailor,ABC123,0.00",
    "Dinghy,10,storage,42,35.50",
]


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def data_file(tmp_path: Path) -> Path:
    """A data file holding the four sample records (unsorted on disk)."""
    path = tmp_path / "boats.csv"
    path.write_text("\n".join(SAMPLE_LINES) + "\n", encoding="utf-8")
    return path


@pytest.fixture
def store(data_file: Path) -> RecordStore:
    """RecordStore over the sample data file."""
    return RecordStore(data_file)


@pytest.fixture
def empty_store(tmp_path: Path) -> RecordStore:
    """RecordStore over an empty (existing) data file."""
    path = tmp_path / "empty.csv"
    path.write_text("", encoding="utf-8")
    return RecordStore(path)


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Change CWD to a temp directory so no stray marinactl.toml is found.

    Use via ``@pytest.mark.usefixtures("_isolated_cwd")`` on command test
    classes.
    """
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("MARINACTL_CONFIG", raising=False)


# ---------------------------------------------------------------------------
# Shared test helpers
# ---------------------------------------------------------------------------


def make_record(
    name: str,
    *,
    length: float = 20.0,
    location: Location | None = None,
    balance: float = 0.0,
) -> Record:
    """Build a record, defaulting to slip 1."""
    return Record(
        name=name,
        length=length,
        location=location if location is not None else SlipLocation(1),
        balance=balance,
    )


ALL_LOCATIONS: list[Location] = [
    SlipLocation(7),
    LandLocation("B"),
    TrailerLocation("ABC123"),
    StorageLocation(42),
]
