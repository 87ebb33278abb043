"""Flat-file persistence for the registry.

INVARIANT: The data file is truth at startup and is rewritten whole on
save. There is no partial update and no autosave; callers decide when
to persist.

Pure line encoding lives in :mod:`marinactl.domain.codec`. This module
handles the actual file I/O and owns the loaded registry.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from marinactl.domain.codec import decode_record, encode_record
from marinactl.domain.errors import CapacityExceeded, LoadError, SaveError
from marinactl.domain.registry import DEFAULT_CAPACITY, Registry

if TYPE_CHECKING:
    from marinactl.config.settings import MarinaSettings

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# File I/O
# ---------------------------------------------------------------------------


def load_registry(
    path: Path,
    *,
    capacity: int = DEFAULT_CAPACITY,
    encoding: str = "utf-8",
) -> Registry:
    """Read every record line from *path* into a new registry.

    Bytes that do not decode are kept as surrogate escapes so
    :func:`save_registry` writes them back unchanged. Blank lines are
    skipped. Rows past *capacity* are dropped with a warning, matching
    the insert contract.

    Raises:
        LoadError: The file cannot be opened or read.
    """
    registry = Registry(capacity)
    try:
        with path.open("r", encoding=encoding, errors="surrogateescape") as fh:
            for lineno, line in enumerate(fh, start=1):
                if not line.strip():
                    continue
                record = decode_record(line)
                try:
                    registry.insert(record)
                except CapacityExceeded:
                    logger.warning(
                        "Dropped record %r at %s:%d: registry full", record.name, path, lineno
                    )
    except OSError as exc:
        msg = f"Could not load data from {path}: {exc}"
        raise LoadError(msg) from exc

    logger.debug("Loaded %d records from %s", len(registry), path)
    return registry


def save_registry(registry: Registry, path: Path, *, encoding: str = "utf-8") -> None:
    """Overwrite *path* with one line per record, in sort order.

    Raises:
        SaveError: The file cannot be opened or written.
    """
    try:
        with path.open("w", encoding=encoding, errors="surrogateescape", newline="\n") as fh:
            for record in registry:
                fh.write(encode_record(record) + "\n")
    except OSError as exc:
        msg = f"Error saving data to {path}: {exc}"
        raise SaveError(msg) from exc

    logger.debug("Saved %d records to %s", len(registry), path)


# ---------------------------------------------------------------------------
# RecordStore — the single owner of the loaded registry
# ---------------------------------------------------------------------------


class RecordStore:
    """Owns the data-file path and a lazily loaded registry.

    A failed load is not fatal: the store starts empty and keeps the
    failure message in :attr:`load_warning` so the caller can report it.
    """

    def __init__(
        self,
        path: Path,
        *,
        capacity: int = DEFAULT_CAPACITY,
        encoding: str = "utf-8",
    ) -> None:
        self.path = path
        self.capacity = capacity
        self.encoding = encoding
        self.load_warning: str | None = None
        self._registry: Registry | None = None

    @classmethod
    def from_settings(cls, settings: MarinaSettings) -> RecordStore:
        """Build a store from resolved settings (path must already be known)."""
        path = settings.data_file
        if path is None:
            msg = "No data file configured"
            raise ValueError(msg)
        return cls(path, capacity=settings.store.capacity, encoding=settings.store.encoding)

    @property
    def registry(self) -> Registry:
        """The registry (loaded from :attr:`path` on first access)."""
        if self._registry is None:
            try:
                self._registry = load_registry(
                    self.path, capacity=self.capacity, encoding=self.encoding
                )
            except LoadError as exc:
                logger.warning("%s; starting with an empty registry", exc)
                self.load_warning = str(exc)
                self._registry = Registry(self.capacity)
        return self._registry

    def take_load_warning(self) -> str | None:
        """Return the pending load failure message once, then clear it."""
        _ = self.registry
        warning, self.load_warning = self.load_warning, None
        return warning

    def save(self) -> None:
        """Persist the registry to :attr:`path`.

        Raises:
            SaveError: The file cannot be written.
        """
        save_registry(self.registry, self.path, encoding=self.encoding)
