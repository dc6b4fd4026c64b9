"""Logging configuration for the CLI.

Library modules only create loggers with ``logging.getLogger(__name__)``;
this module is the one place that attaches a handler.  Log records go
to stderr through Rich's ``RichHandler`` when Rich is installed, and
through a plain ``StreamHandler`` otherwise.
"""

from __future__ import annotations

import logging
import sys

from code_escape.config import Settings, get_settings

LOGGER_NAME = "code_escape"
DEFAULT_LEVEL = logging.WARNING

_PLAIN_FORMAT = "%(levelname)s %(name)s: %(message)s"


def resolve_level(verbosity: int, settings: Settings | None = None) -> int:
    """Map ``-v`` count and settings to a logging level.

    ``-v`` selects INFO and ``-vv`` or more selects DEBUG.  Without any
    ``-v``, a valid level name in :attr:`Settings.log_level` (the
    ``CODE_ESCAPE_LOG_LEVEL`` variable) wins over the WARNING default.
    """
    if verbosity >= 2:
        return logging.DEBUG
    if verbosity == 1:
        return logging.INFO

    if settings is None:
        settings = get_settings()
    raw = (settings.log_level or "").strip().upper()
    if raw:
        level = logging.getLevelName(raw)
        if isinstance(level, int):
            return level
    return DEFAULT_LEVEL


def _build_handler() -> logging.Handler:
    try:
        from rich.logging import RichHandler
    except ModuleNotFoundError:
        handler: logging.Handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(_PLAIN_FORMAT))
        return handler

    from code_escape.cli.console import get_rich_console

    return RichHandler(
        console=get_rich_console(),
        show_time=False,
        show_path=False,
        markup=False,
    )


def configure_logging(level: int) -> logging.Logger:
    """Attach a single stderr handler to the ``code_escape`` logger.

    Repeated calls replace the previously installed handler instead of
    stacking a new one.
    """
    logger = logging.getLogger(LOGGER_NAME)
    for existing in list(logger.handlers):
        if getattr(existing, "_code_escape_handler", False):
            logger.removeHandler(existing)

    handler = _build_handler()
    handler._code_escape_handler = True  # type: ignore[attr-defined]
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False
    return logger
