"""Tests for StoreService — saving the registry."""

from __future__ import annotations

from pathlib import Path

from marinactl.infrastructure.store import RecordStore, load_registry
from marinactl.services.records import RecordService
from marinactl.services.store import StoreService


class TestSave:
    def test_save_persists_changes(self, store: RecordStore) -> None:
        RecordService(store).remove("Moby")
        result = StoreService(store).save()
        assert result.ok
        assert result.op == "save"
        assert result.data == {"path": str(store.path), "count": 3}
        assert len(load_registry(store.path)) == 3

    def test_save_creates_missing_file(self, tmp_path: Path) -> None:
        store = RecordStore(tmp_path / "new.csv")
        RecordService(store).add("Fresh,12,slip,4,0")
        assert StoreService(store).save().ok
        assert (tmp_path / "new.csv").read_text(encoding="utf-8") == "Fresh,12,slip,4,0.00\n"

    def test_save_failure(self, tmp_path: Path) -> None:
        store = RecordStore(tmp_path / "no-such-dir" / "boats.csv")
        result = StoreService(store).save()
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "SAVE_FAILED"
