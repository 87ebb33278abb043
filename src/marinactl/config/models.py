"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, marinactl.toml only contains
overrides. A minimal config needs only ``[store] path``.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from marinactl.domain.registry import DEFAULT_CAPACITY

# --- marinactl.toml sections ---


class StoreConfig(BaseModel):
    """[store] section."""

    model_config = {"frozen": True}

    path: str | None = None
    capacity: int = Field(default=DEFAULT_CAPACITY, gt=0)
    encoding: str = "utf-8"


class MarinaConfig(BaseModel):
    """Root configuration composing all sections."""

    model_config = {"frozen": True}

    store: StoreConfig = Field(default_factory=StoreConfig)
