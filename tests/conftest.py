"""Shared pytest fixtures for zxclib tests."""

from __future__ import annotations

import logging
from collections.abc import Generator

import pytest


@pytest.fixture
def _restore_logging() -> Generator[None]:
    """Restore the ``zxclib`` logger after a test reconfigures it.

    Use via ``@pytest.mark.usefixtures("_restore_logging")``.
    """
    zxc = logging.getLogger("zxclib")
    original_handlers = zxc.handlers[:]
    original_level = zxc.level
    original_propagate = zxc.propagate
    yield
    zxc.handlers = original_handlers
    zxc.setLevel(original_level)
    zxc.propagate = original_propagate
