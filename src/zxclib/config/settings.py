"""Unified settings — init kwargs, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — overrides passed to :meth:`ZxcSettings.load`
  2. Env vars     — ``ZXCLIB_*`` prefix, ``__`` for nested sections
  3. TOML file    — explicit ``config_path`` or ``ZXCLIB_CONFIG``
  4. Code defaults — baked into the section models
"""

from __future__ import annotations

import os
import threading
import tomllib
from pathlib import Path
from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from zxclib.config.models import LoggingConfig
from zxclib.errors import ZxclibError

CONFIG_ENV_VAR = "ZXCLIB_CONFIG"


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Read settings from a TOML file, if one was given."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if toml_path and toml_path.is_file():
            raw = toml_path.read_text(encoding="utf-8")
            try:
                self._data = tomllib.loads(raw)
            except tomllib.TOMLDecodeError as exc:
                msg = f"Invalid TOML in {toml_path}: {exc}"
                raise ZxclibError(msg) from exc

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Return ``(value, field_name, value_is_complex)``."""
        val = self._data.get(field_name)
        return val, field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        return self._data


# Thread-local storage for TOML path during construction.
_tls = threading.local()


class ZxcSettings(BaseSettings):
    """Frozen settings for zxclib.

    Attributes:
        config_path: TOML file the settings were read from, if any.
        logging: Logging verbosity and renderer.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "ZXCLIB_",
        "env_nested_delimiter": "__",
    }

    config_path: Path | None = None
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

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
    def load(cls, config_path: str | Path | None = None, **overrides: Any) -> ZxcSettings:
        """Build settings, reading *config_path* (or ``$ZXCLIB_CONFIG``) if it exists."""
        raw_path = config_path or os.environ.get(CONFIG_ENV_VAR)
        toml_path: Path | None = None
        if raw_path:
            p = Path(raw_path)
            if p.is_file():
                toml_path = p

        _tls.toml_path = toml_path
        try:
            return cls(config_path=toml_path, **overrides)
        finally:
            _tls.toml_path = None
