"""Logging setup for applications embedding zxclib.

Two output modes:
- Human (default): console output to stderr
- JSON: structured JSON lines to stderr

Only the ``zxclib`` logger is configured. The root logger and structlog's
global configuration belong to the host application and are left alone.
"""

from __future__ import annotations

import logging
import sys

import structlog

from zxclib.log import ROOT_LOGGER_NAME, SHARED_PROCESSORS

HANDLER_NAME = "zxclib.stderr"


def _renderer_chain(log_json: bool) -> list[structlog.types.Processor]:
    if log_json:
        return [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    return [structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())]


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
) -> None:
    """Route ``zxclib`` log records to stderr.

    Args:
        verbose: Emit DEBUG records (invocation traces). When False, only WARNING+.
        log_json: Use JSON renderer instead of console renderer.

    Calling it again replaces the handler installed by the previous call.
    """
    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=SHARED_PROCESSORS,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            *_renderer_chain(log_json),
        ],
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(formatter)

    zxc_logger = logging.getLogger(ROOT_LOGGER_NAME)
    for existing in [h for h in zxc_logger.handlers if h.get_name() == HANDLER_NAME]:
        zxc_logger.removeHandler(existing)
    zxc_logger.addHandler(handler)
    zxc_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    zxc_logger.propagate = False
