"""Shared pytest fixtures and configuration for the code-escape test suite.

Guidelines
----------
* Core tests must be pure — no side effects.
* File I/O only under ``tmp_path``.
* Tests must not depend on OS state.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest

from code_escape.cli.logging_setup import LOGGER_NAME


@pytest.fixture(autouse=True)
def _reset_package_logger() -> Iterator[None]:
    """Undo handler/level/propagation changes made by ``main()``."""
    logger = logging.getLogger(LOGGER_NAME)
    saved = (list(logger.handlers), logger.level, logger.propagate)
    yield
    logger.handlers[:] = saved[0]
    logger.setLevel(saved[1])
    logger.propagate = saved[2]
