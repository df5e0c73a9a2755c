"""Configuration layer — settings and logging setup."""

from __future__ import annotations

from zxclib.config.logging import configure_logging
from zxclib.config.settings import ZxcSettings


def setup(settings: ZxcSettings | None = None) -> ZxcSettings:
    """Load settings (unless given) and apply the logging configuration."""
    settings = settings or ZxcSettings.load()
    configure_logging(
        verbose=settings.logging.verbose,
        log_json=settings.logging.json_output,
    )
    return settings
