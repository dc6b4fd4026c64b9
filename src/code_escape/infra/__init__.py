"""Infrastructure layer — external system integration.

This layer wraps all interaction with the filesystem and the standard
streams.  Every raw ``OSError`` must be caught here and re-raised as a
:class:`~code_escape.exceptions.CodeEscapeError` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
"""

from code_escape.infra.text_io import is_stdio, read_text, write_text

__all__: list[str] = [
    "is_stdio",
    "read_text",
    "write_text",
]
