"""zxclib — declarative service objects and formatting helpers."""

import logging

from zxclib.errors import (
    SchemaError,
    ServiceCallError,
    ServiceNotImplementedError,
    ZxclibError,
)
from zxclib.services.base import Service
from zxclib.services.result import ServiceOutcome
from zxclib.services.schema import SchemaBuilder, ServiceSchema

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "SchemaBuilder",
    "SchemaError",
    "Service",
    "ServiceCallError",
    "ServiceNotImplementedError",
    "ServiceOutcome",
    "ServiceSchema",
    "ZxclibError",
]
