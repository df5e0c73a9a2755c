"""ServiceOutcome — what a lenient invocation hands back.

INVARIANT: ``result`` is only set when ``errors`` is empty and the operation
body ran. Validation errors come first (declaration order), followed by at
most one execution error.

INVARIANT: An outcome is read-only once built. ``arguments`` and ``fields``
are copied into :class:`types.MappingProxyType` views.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from pydantic import BaseModel, Field, field_serializer, field_validator


class ServiceOutcome(BaseModel):
    """Frozen record of a single service invocation.

    Attributes:
        op: Name of the service class that was invoked.
        arguments: The mapping the caller passed in.
        fields: Resolved input values by name. Missing required inputs are absent.
        errors: Human-readable failure messages; empty on success.
        result: Return value of the operation body on success.
    """

    model_config = {"frozen": True}

    op: str
    arguments: Mapping[str, Any] = Field(default_factory=dict, validate_default=True)
    fields: Mapping[str, Any] = Field(default_factory=dict, validate_default=True)
    errors: tuple[str, ...] = ()
    result: Any = None

    @field_validator("arguments", "fields", mode="after")
    @classmethod
    def _read_only(cls, value: Mapping[str, Any]) -> Mapping[str, Any]:
        return MappingProxyType(dict(value))

    @field_serializer("arguments", "fields")
    def _as_dict(self, value: Mapping[str, Any]) -> dict[str, Any]:
        return dict(value)

    def is_valid(self) -> bool:
        return not self.errors

    def is_invalid(self) -> bool:
        return not self.is_valid()

    def __getitem__(self, name: str) -> Any:
        return self.fields[name]

    def get(self, name: str, default: Any = None) -> Any:
        return self.fields.get(name, default)
