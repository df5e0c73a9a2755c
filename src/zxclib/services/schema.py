"""Input declarations for services.

A :class:`ServiceSchema` is an immutable, ordered set of :class:`InputSpec`
built once per service type with a :class:`SchemaBuilder` and attached to the
service class as ``schema``.

Usage::

    class MultiplyService(Service):
        schema = (
            ServiceSchema.builder()
            .declare_input("multiplier", default=1)
            .declare_inputs("num1", "num2", default=0)
            .build()
        )

INVARIANT: A schema never changes after ``build()``. Every invocation reads
the same schema; only the resolved fields are per-call.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Annotated, Any, Literal

from pydantic import BaseModel, Field

from zxclib.errors import SchemaError


# Sentinel for "option not supplied"; None is a legitimate default value.
MISSING: Any = object()


class LiteralDefault(BaseModel):
    """A fixed default value (``None`` is a valid value)."""

    model_config = {"frozen": True}

    kind: Literal["literal"] = "literal"
    value: Any = None

    def evaluate(self) -> Any:
        return self.value


class ComputedDefault(BaseModel):
    """A zero-argument factory, called fresh on every invocation that needs it."""

    model_config = {"frozen": True}

    kind: Literal["computed"] = "computed"
    factory: Callable[[], Any]

    def evaluate(self) -> Any:
        return self.factory()


Default = Annotated[LiteralDefault | ComputedDefault, Field(discriminator="kind")]


class InputSpec(BaseModel):
    """One declared input. Required when ``default`` is None."""

    model_config = {"frozen": True}

    name: str
    default: Default | None = None

    @property
    def has_default(self) -> bool:
        return self.default is not None


def _is_empty(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, (str, bytes, list, tuple, dict, set, frozenset)):
        return len(value) == 0
    return False


class ServiceSchema(BaseModel):
    """Frozen, ordered input declarations for one service type.

    Attributes:
        inputs: Declared inputs in declaration order.
        warn_empty: Input names that log a warning when passed empty.
    """

    model_config = {"frozen": True}

    inputs: tuple[InputSpec, ...] = ()
    warn_empty: tuple[str, ...] = ()

    @classmethod
    def builder(cls) -> SchemaBuilder:
        return SchemaBuilder()

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(spec.name for spec in self.inputs)

    def resolve(self, arguments: Mapping[str, Any]) -> tuple[dict[str, Any], list[str]]:
        """Populate fields from *arguments* and collect missing-input errors.

        An absent key takes the default (if any). A present key always wins,
        even when its value is ``None``. Every required input is checked so
        all missing names are reported in one pass.
        """
        fields: dict[str, Any] = {}
        errors: list[str] = []
        for spec in self.inputs:
            if spec.name in arguments:
                fields[spec.name] = arguments[spec.name]
            elif spec.default is not None:
                fields[spec.name] = spec.default.evaluate()
            else:
                errors.append(f"{spec.name} is required")
        return fields, errors

    def empty_inputs(self, arguments: Mapping[str, Any]) -> list[str]:
        """Names from ``warn_empty`` that are absent or empty in *arguments*."""
        return [name for name in self.warn_empty if _is_empty(arguments.get(name))]


class SchemaBuilder:
    """Collects input declarations, then freezes them with :meth:`build`.

    Redeclaring a name replaces the earlier entry in place (last write wins).
    """

    def __init__(self, base: ServiceSchema | None = None) -> None:
        self._specs: dict[str, InputSpec] = {}
        self._warn_empty: list[str] = []
        if base is not None:
            self._specs = {spec.name: spec for spec in base.inputs}
            self._warn_empty = list(base.warn_empty)

    def declare_input(
        self,
        name: str,
        *,
        default: Any = MISSING,
        default_factory: Callable[[], Any] | Any = MISSING,
    ) -> SchemaBuilder:
        """Register *name*. Without a default option the input is required.

        Names must be Python identifiers so every input can be passed as a
        keyword to :meth:`Service.invoke`.

        Raises:
            SchemaError: On an invalid name, both default options, or a
                non-callable ``default_factory``.
        """
        if not name or not name.isidentifier():
            msg = f"Invalid input name: {name!r}"
            raise SchemaError(msg)
        if default is not MISSING and default_factory is not MISSING:
            msg = f"{name}: cannot specify both default and default_factory"
            raise SchemaError(msg)

        spec_default: LiteralDefault | ComputedDefault | None = None
        if default_factory is not MISSING:
            if not callable(default_factory):
                msg = f"{name}: default_factory must be callable"
                raise SchemaError(msg)
            spec_default = ComputedDefault(factory=default_factory)
        elif default is not MISSING:
            spec_default = LiteralDefault(value=default)

        self._specs[name] = InputSpec(name=name, default=spec_default)
        return self

    def declare_inputs(
        self,
        *names: str,
        default: Any = MISSING,
        default_factory: Callable[[], Any] | Any = MISSING,
    ) -> SchemaBuilder:
        """Declare several inputs sharing the same options."""
        for name in names:
            self.declare_input(name, default=default, default_factory=default_factory)
        return self

    def warn_empty_inputs(self, *names: str) -> SchemaBuilder:
        """Log a warning at invocation time when any of *names* is empty."""
        for name in names:
            if name not in self._warn_empty:
                self._warn_empty.append(name)
        return self

    def build(self) -> ServiceSchema:
        unknown = [name for name in self._warn_empty if name not in self._specs]
        if unknown:
            msg = f"warn_empty_inputs names undeclared inputs: {', '.join(unknown)}"
            raise SchemaError(msg)
        return ServiceSchema(
            inputs=tuple(self._specs.values()),
            warn_empty=tuple(self._warn_empty),
        )
