"""Custom exception hierarchy for code-escape.

The pure ``escape``/``unescape`` functions never raise.  Everything that
can fail around them (reading input, writing output, strict-mode
checks) raises a subclass of :class:`CodeEscapeError`.  Raw ``OSError``
and decoding errors must never propagate beyond the infrastructure
layer — they are caught and re-raised as a typed subclass defined here.

Hierarchy
---------
CodeEscapeError
├── InputReadError
├── OutputWriteError
├── DoubleEscapeError
├── InvalidDirectionError
└── EnvironmentError
"""

from __future__ import annotations


class CodeEscapeError(Exception):
    """Base exception for all code-escape errors.

    Every user-visible error condition must map to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- I/O -------------------------------------------------------------------

class InputReadError(CodeEscapeError):
    """Raised when input content cannot be read or decoded."""


class OutputWriteError(CodeEscapeError):
    """Raised when transformed content cannot be written."""


# --- Transform -------------------------------------------------------------

class DoubleEscapeError(CodeEscapeError):
    """Raised in strict mode when escaping content that looks escaped."""


class InvalidDirectionError(CodeEscapeError):
    """Raised when a transform direction name is not recognised."""


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(CodeEscapeError):
    """Raised when an optional runtime dependency is not available."""
