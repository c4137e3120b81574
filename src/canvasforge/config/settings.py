"""Unified settings — caller kwargs, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — passed by the embedding service
  2. Env vars     — ``CANVASFORGE_*`` prefix, ``__`` for nested sections
  3. TOML file    — ``canvasforge.toml`` discovered via walk-up
  4. Code defaults — baked into the section models

Uses Pydantic Settings v2 with a custom :class:`TomlSettingsSource` that
reuses the ``find_config`` walk-up discovery from
:mod:`canvasforge.config.discovery`.
"""

from __future__ import annotations

import threading
from pathlib import Path
from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from canvasforge.config.discovery import find_config, read_toml
from canvasforge.config.models import DirectiveConfig, LayoutConfig, VariationConfig


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Read settings from a ``canvasforge.toml`` file."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if toml_path and toml_path.is_file():
            self._data = read_toml(toml_path)

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Return ``(value, field_name, value_is_complex)``."""
        val = self._data.get(field_name)
        return val, field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        """Return the full TOML data dict for Pydantic to merge."""
        return self._data


# Thread-local storage for TOML path during construction.
_tls = threading.local()


class CanvasforgeSettings(BaseSettings):
    """Unified settings for the layout and variation engines.

    Attributes:
        config_path: The TOML file the settings were read from, if any.
        verbose: Enable debug logging and service telemetry.
        log_json: Emit JSON log lines instead of console output.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "CANVASFORGE_",
        "env_nested_delimiter": "__",
    }

    config_path: Path | None = None

    verbose: bool = False
    log_json: bool = False

    # --- TOML sections (reuse the frozen section models) ---
    layout: LayoutConfig = Field(default_factory=LayoutConfig)
    variation: VariationConfig = Field(default_factory=VariationConfig)
    directive: DirectiveConfig = Field(default_factory=DirectiveConfig)

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
    def load(
        cls,
        *,
        config_path: str | Path | None = None,
        search_from: Path | None = None,
        **overrides: Any,
    ) -> CanvasforgeSettings:
        """Build settings from an explicit or discovered TOML file.

        Args:
            config_path: Explicit TOML path; skips discovery when given.
            search_from: Directory to start the walk-up search from
                (default: cwd).
            **overrides: Highest-priority values, e.g. ``verbose=True``.
        """
        toml_path: Path | None = None
        if config_path:
            p = Path(config_path)
            if p.is_file():
                toml_path = p
        else:
            toml_path = find_config(search_from)

        _tls.toml_path = toml_path
        try:
            return cls(config_path=toml_path, **overrides)
        finally:
            _tls.toml_path = None
