"""Tests for BaseService result helpers."""

from __future__ import annotations

from marinactl.domain.errors import NotFound
from marinactl.infrastructure.store import RecordStore
from marinactl.services.base import BaseService


class TestBaseService:
    def test_ok_attaches_meta(self, store: RecordStore) -> None:
        result = BaseService(store)._ok("noop", {"x": 1})
        assert result.ok
        assert result.data == {"x": 1}
        assert result.meta == {"path": str(store.path), "records": 4}

    def test_fail_copies_error_code(self, store: RecordStore) -> None:
        result = BaseService(store)._fail("noop", NotFound("Ghost"), {"name": "Ghost"})
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "NOT_FOUND"
        assert result.error.message == "No boat with that name: Ghost"
        assert result.error.detail == {"name": "Ghost"}
