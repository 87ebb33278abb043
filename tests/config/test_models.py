"""Tests for the pydantic config section models."""

import pytest
from pydantic import ValidationError

from marinactl.config.models import MarinaConfig, StoreConfig


class TestStoreConfig:
    def test_defaults(self) -> None:
        cfg = StoreConfig()
        assert cfg.path is None
        assert cfg.capacity == 120
        assert cfg.encoding == "utf-8"

    def test_capacity_must_be_positive(self) -> None:
        with pytest.raises(ValidationError):
            StoreConfig(capacity=0)

    def test_frozen(self) -> None:
        cfg = StoreConfig()
        with pytest.raises(ValidationError):
            cfg.capacity = 5  # type: ignore[misc]


class TestMarinaConfig:
    def test_sparse_validation(self) -> None:
        cfg = MarinaConfig.model_validate({"store": {"path": "boats.csv"}})
        assert cfg.store.path == "boats.csv"
        assert cfg.store.capacity == 120
