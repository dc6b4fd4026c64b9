"""Core / service layer — pure text transforms and their orchestration.

Rules
-----
* No ``print()`` calls.
* No filesystem or network I/O.
* No imports from ``cli`` or ``infra``.
* All functions must be fully typed and deterministic.
"""

from code_escape.core.escaping import ESCAPE_STEPS, UNESCAPE_STEPS, escape, unescape
from code_escape.core.inspection import find_escape_sequences, looks_escaped
from code_escape.core.models import Direction, TransformResult
from code_escape.core.service import EscapeService

__all__: list[str] = [
    "Direction",
    "ESCAPE_STEPS",
    "EscapeService",
    "TransformResult",
    "UNESCAPE_STEPS",
    "escape",
    "find_escape_sequences",
    "looks_escaped",
    "unescape",
]
