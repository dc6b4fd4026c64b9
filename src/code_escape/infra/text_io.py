"""Infrastructure: reading input content and writing transformed output.

Content is read from a file or standard input and written to a file or
standard output.  Files are opened with ``newline=""`` and standard
input is decoded from its byte buffer, so line endings on input pass
through untouched.

Rules
-----
* ``None`` or ``-`` as a path selects the standard stream.
* ``OSError`` and ``UnicodeError`` never escape this module — they are
  re-raised as :class:`~code_escape.exceptions.InputReadError` or
  :class:`~code_escape.exceptions.OutputWriteError`.
* No ``print()`` — callers handle user-facing output.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import IO

from code_escape.exceptions import InputReadError, OutputWriteError

logger = logging.getLogger(__name__)

STDIO_MARKER = "-"
DEFAULT_ENCODING = "utf-8"


def is_stdio(path: Path | None) -> bool:
    """Return ``True`` when *path* designates a standard stream."""
    return path is None or str(path) == STDIO_MARKER


# ---------------------------------------------------------------------------
# Reading
# ---------------------------------------------------------------------------

def _read_stdin(stdin: IO[str] | None, encoding: str) -> str:
    """Read standard input without newline translation.

    The process stdin is read through its byte buffer, since its text
    layer turns ``\\r\\n`` into ``\\n``.  An explicit *stdin* stream, or a
    replacement without a buffer, is read as text.
    """
    if stdin is not None:
        return stdin.read()
    buffer = getattr(sys.stdin, "buffer", None)
    if buffer is None:
        return sys.stdin.read()
    return buffer.read().decode(encoding)


def read_text(
    path: Path | None,
    *,
    stdin: IO[str] | None = None,
    encoding: str = DEFAULT_ENCODING,
) -> str:
    """Read the whole of *path*, or of standard input.

    Raises
    ------
    InputReadError
        When the file is missing, unreadable, or not valid *encoding*.
    """
    if path is None or is_stdio(path):
        logger.debug("Reading content from standard input")
        try:
            return _read_stdin(stdin, encoding)
        except (OSError, UnicodeError) as exc:
            raise InputReadError(
                f"Could not read standard input: {exc}",
            ) from exc

    logger.debug("Reading content from %s", path)
    try:
        with path.open("r", encoding=encoding, newline="") as handle:
            return handle.read()
    except FileNotFoundError as exc:
        raise InputReadError(
            f"Input file not found: {path}",
            hint="Check the path, or pass '-' to read standard input.",
        ) from exc
    except UnicodeError as exc:
        raise InputReadError(
            f"Input file is not valid {encoding}: {path}",
        ) from exc
    except OSError as exc:
        raise InputReadError(
            f"Could not read {path}: {exc.strerror or exc}",
        ) from exc


# ---------------------------------------------------------------------------
# Writing
# ---------------------------------------------------------------------------

def write_text(
    text: str,
    path: Path | None,
    *,
    stdout: IO[str] | None = None,
    encoding: str = DEFAULT_ENCODING,
) -> None:
    """Write *text* verbatim to *path*, or to standard output.

    Raises
    ------
    OutputWriteError
        When the destination cannot be written.
    """
    if path is None or is_stdio(path):
        stream = stdout if stdout is not None else sys.stdout
        try:
            stream.write(text)
            stream.flush()
        except (OSError, UnicodeError) as exc:
            raise OutputWriteError(
                f"Could not write to standard output: {exc}",
            ) from exc
        return

    logger.debug("Writing %d chars to %s", len(text), path)
    try:
        with path.open("w", encoding=encoding, newline="") as handle:
            handle.write(text)
    except UnicodeError as exc:
        raise OutputWriteError(
            f"Output cannot be encoded as {encoding}: {path}",
        ) from exc
    except OSError as exc:
        raise OutputWriteError(
            f"Could not write {path}: {exc.strerror or exc}",
            hint="Check that the parent directory exists and is writable.",
        ) from exc
