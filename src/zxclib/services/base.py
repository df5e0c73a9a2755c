"""Service — abstract foundation for command objects.

A concrete service declares its inputs as a :class:`ServiceSchema` and
overrides :meth:`Service.call`. Callers never instantiate services directly;
they go through one of two class-level entry points:

- :meth:`Service.invoke` collects validation and execution failures into a
  :class:`ServiceOutcome`.
- :meth:`Service.invoke_strict` returns the bare result or raises.

Usage::

    class MultiplyService(Service):
        schema = (
            ServiceSchema.builder()
            .declare_input("multiplier", default=1)
            .declare_inputs("num1", "num2", default=0)
            .warn_empty_inputs("multiplier")
            .build()
        )

        def call(self) -> int:
            return self.fields["num1"] * self.fields["num2"] * self.fields["multiplier"]

    outcome = MultiplyService.invoke(multiplier=2, num1=3, num2=4)
    outcome.is_valid()  # True
    outcome.result  # 24
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, ClassVar

from zxclib.errors import ServiceCallError, ServiceNotImplementedError
from zxclib.log import get_logger
from zxclib.services.result import ServiceOutcome
from zxclib.services.schema import ServiceSchema

logger = logging.getLogger(__name__)
log = get_logger(__name__)


class Service:
    """Base class for all services.

    Each invocation builds its own instance, so ``fields`` and ``arguments``
    are private to that call. ``schema`` is shared by every invocation of the
    class and must not be replaced once invocations have started.
    """

    schema: ClassVar[ServiceSchema] = ServiceSchema()

    def __init__(self, fields: Mapping[str, Any], arguments: Mapping[str, Any]) -> None:
        self.fields: dict[str, Any] = dict(fields)
        self.arguments = arguments

    def call(self) -> Any:
        """The operation body. Subclasses must override it."""
        raise ServiceNotImplementedError(type(self).__name__)

    # --- Entry points ---

    @classmethod
    def invoke(cls, arguments: Mapping[str, Any] | None = None, /, **kwargs: Any) -> ServiceOutcome:
        """Run the service, collecting every failure into the outcome.

        Only :class:`ServiceNotImplementedError` escapes.
        """
        return cls._run(_merge(arguments, kwargs), pass_exceptions=False)

    @classmethod
    def invoke_strict(cls, arguments: Mapping[str, Any] | None = None, /, **kwargs: Any) -> Any:
        """Run the service and return its bare result.

        Raises:
            ServiceCallError: If required inputs are missing.
            Exception: Whatever the operation body or a default factory raised, unchanged.
        """
        outcome = cls._run(_merge(arguments, kwargs), pass_exceptions=True)
        if outcome.is_invalid():
            raise ServiceCallError(outcome.errors)
        return outcome.result

    # --- Lifecycle ---

    @classmethod
    def _ensure_implemented(cls) -> None:
        if cls.call is Service.call:
            raise ServiceNotImplementedError(cls.__name__)

    @classmethod
    def _run(cls, arguments: dict[str, Any], *, pass_exceptions: bool) -> ServiceOutcome:
        cls._ensure_implemented()
        op = cls.__name__

        for name in cls.schema.empty_inputs(arguments):
            log.warning("service.empty_input", op=op, input=name)

        fields: dict[str, Any] = {}
        errors: list[str] = []
        result: Any = None
        # Default factories run inside resolve; their errors are captured like call()'s.
        try:
            fields, errors = cls.schema.resolve(arguments)
            if not errors:
                result = cls(fields, arguments).call()
        except ServiceNotImplementedError:
            raise
        except Exception as exc:
            if pass_exceptions:
                raise
            logger.debug("Service %s raised during call", op, exc_info=True)
            errors.append(str(exc) or type(exc).__name__)

        log.debug("service.invoke", op=op, ok=not errors, errors=len(errors))
        return ServiceOutcome(
            op=op,
            arguments=arguments,
            fields=fields,
            errors=tuple(errors),
            result=result,
        )


def _merge(arguments: Mapping[str, Any] | None, kwargs: dict[str, Any]) -> dict[str, Any]:
    """Keyword arguments override keys of the positional mapping."""
    merged = dict(arguments or {})
    merged.update(kwargs)
    return merged
