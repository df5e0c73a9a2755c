"""structlog loggers bound to the stdlib ``zxclib.*`` logger tree.

Events go through :mod:`logging`, so the host's levels and handlers decide
what is shown. Nothing here touches structlog's global configuration.
"""

from __future__ import annotations

import logging
from typing import Any

import structlog

ROOT_LOGGER_NAME = "zxclib"

# Also used as ``foreign_pre_chain`` so plain stdlib records get the same fields.
SHARED_PROCESSORS: list[structlog.types.Processor] = [
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.add_log_level,
    structlog.stdlib.add_logger_name,
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.UnicodeDecoder(),
]


def get_logger(name: str) -> Any:
    """Return a structlog ``BoundLogger`` wrapping ``logging.getLogger(name)``.

    Records carry the event dict for :class:`structlog.stdlib.ProcessorFormatter`.
    """
    return structlog.wrap_logger(
        logging.getLogger(name),
        processors=[
            structlog.stdlib.filter_by_level,
            *SHARED_PROCESSORS,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
    )
