"""Unified settings — CLI flags, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — CLI flags passed by Click
  2. Env vars     — ``MARINACTL_*`` prefix (``MARINACTL_STORE__PATH``)
  3. TOML file    — ``marinactl.toml`` discovered via walk-up
  4. Code defaults — baked into the section models

Uses Pydantic Settings v2 with a custom :class:`TomlSettingsSource` that
reuses the ``find_config`` walk-up discovery from
:mod:`marinactl.config.discovery`.
"""

from __future__ import annotations

import threading
import tomllib
from pathlib import Path
from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from marinactl.config.discovery import find_config
from marinactl.config.models import StoreConfig


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Read settings from a ``marinactl.toml`` file discovered via walk-up."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if toml_path and toml_path.is_file():
            raw = toml_path.read_text(encoding="utf-8")
            try:
                self._data = tomllib.loads(raw)
            except tomllib.TOMLDecodeError as exc:
                import click

                msg = f"Invalid TOML in {toml_path}: {exc}"
                raise click.ClickException(msg) from exc

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Return ``(value, field_name, value_is_complex)``."""
        val = self._data.get(field_name)
        return val, field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        """Return the full TOML data dict for Pydantic to merge."""
        return self._data


# Thread-local storage for TOML path during construction.
_tls = threading.local()


class MarinaSettings(BaseSettings):
    """Unified settings for the marinactl CLI.

    Attributes:
        base_dir: Directory that relative ``[store] path`` values resolve
            against (parent of ``marinactl.toml``, or CWD if none found).
        config_path: The TOML file in effect, or None.
        file: Data file given on the command line (``--file``).
    """

    model_config = {
        "frozen": True,
        "env_prefix": "MARINACTL_",
        "env_nested_delimiter": "__",
    }

    # --- Resolved paths ---
    base_dir: Path = Field(default_factory=Path.cwd)
    config_path: Path | None = None
    file: Path | None = None

    # --- CLI flags ---
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    # --- TOML sections ---
    store: StoreConfig = Field(default_factory=StoreConfig)

    @property
    def data_file(self) -> Path | None:
        """The data file to load and save, or None if none is configured.

        ``--file`` wins; otherwise ``[store] path`` relative to :attr:`base_dir`.
        """
        if self.file is not None:
            return self.file
        if self.store.path:
            return self.base_dir / self.store.path
        return None

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Insert TOML source between env vars and defaults."""
        toml_path = getattr(_tls, "toml_path", None)
        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls, toml_path),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        base_dir: Path | None = None,
        file: str | Path | None = None,
        **cli_flags: Any,
    ) -> MarinaSettings:
        """Construct settings from CLI invocation.

        Discovers ``marinactl.toml`` via walk-up (or explicit *config_path*),
        resolves *base_dir* from the config file's parent directory,
        and merges CLI flags as highest-priority overrides.
        """
        toml_path: Path | None = None
        if config_path:
            p = Path(config_path)
            if p.is_file():
                toml_path = p
        else:
            toml_path = find_config(base_dir)

        resolved_dir = base_dir
        if resolved_dir is None:
            resolved_dir = toml_path.parent if toml_path else Path.cwd()

        if file is not None:
            cli_flags["file"] = Path(file)

        _tls.toml_path = toml_path
        try:
            return cls(
                base_dir=resolved_dir,
                config_path=toml_path,
                **cli_flags,
            )
        finally:
            _tls.toml_path = None
