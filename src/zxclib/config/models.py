"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, the config file only holds overrides.
"""

from __future__ import annotations

from pydantic import BaseModel


class LoggingConfig(BaseModel):
    """[logging] section."""

    model_config = {"frozen": True}

    verbose: bool = False
    json_output: bool = False
