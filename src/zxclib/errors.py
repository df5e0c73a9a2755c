"""Exception taxonomy for zxclib.

Validation and execution failures are collected into a ServiceOutcome by
``Service.invoke``. Only the strict entry point and misuse of the framework
raise the errors below.
"""

from __future__ import annotations

from collections.abc import Iterable


class ZxclibError(Exception):
    """Base class for all zxclib errors."""


class ServiceCallError(ZxclibError):
    """Strict invocation failed validation.

    The message is every collected error joined with ``"; "``.
    """

    def __init__(self, errors: Iterable[str]) -> None:
        self.errors: tuple[str, ...] = tuple(errors)
        super().__init__("; ".join(self.errors))


class ServiceNotImplementedError(ZxclibError, NotImplementedError):
    """A concrete service did not override ``call``. Never collected."""

    def __init__(self, service_name: str) -> None:
        self.service_name = service_name
        super().__init__(f"{service_name}.call not implemented")


class SchemaError(ZxclibError, ValueError):
    """Invalid input declaration."""
