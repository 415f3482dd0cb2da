from __future__ import annotations

import logging
from typing import Iterator

import pytest


@pytest.fixture(autouse=True)
def _restore_package_logger() -> Iterator[None]:
    """The CLI attaches handlers to the package logger; undo that per test."""
    pkg_logger = logging.getLogger("isbn_recovery")
    old_handlers = pkg_logger.handlers[:]
    old_level = pkg_logger.level
    old_propagate = pkg_logger.propagate
    yield
    for h in pkg_logger.handlers[:]:
        if h not in old_handlers:
            pkg_logger.removeHandler(h)
    pkg_logger.setLevel(old_level)
    pkg_logger.propagate = old_propagate
