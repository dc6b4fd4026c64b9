"""Core escape service — runs a direction and reports on its input.

This is the service class consumed by the CLI layer.  It wraps the pure
pipelines from :mod:`code_escape.core.escaping` with direction
dispatch, already-escaped detection and logging.

Guarantees
----------
* No I/O, no ``print()``, no filesystem access.
* Only :class:`~code_escape.exceptions.CodeEscapeError` subclasses escape.
"""

from __future__ import annotations

import logging

from code_escape.core.escaping import escape, unescape
from code_escape.core.inspection import find_escape_sequences
from code_escape.core.models import Direction, TransformResult
from code_escape.exceptions import DoubleEscapeError, InvalidDirectionError

logger = logging.getLogger(__name__)


class EscapeService:
    """Stateless service that escapes and unescapes content.

    Parameters
    ----------
    strict:
        When ``True``, refuse to escape content that already contains
        escape sequences instead of only logging a warning.
    """

    def __init__(self, *, strict: bool = False) -> None:
        self._strict: bool = strict

    @property
    def strict(self) -> bool:
        return self._strict

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def escape(self, content: str | None) -> TransformResult:
        """Escape *content*.

        Raises
        ------
        DoubleEscapeError
            In strict mode, when *content* already looks escaped.
        """
        prior = find_escape_sequences(content)
        if prior:
            self._report_prior_sequences(prior)

        text = escape(content)
        self._log_transform(Direction.ESCAPE, content, text)
        return TransformResult(
            direction=Direction.ESCAPE,
            text=text,
            prior_sequences=prior,
        )

    def unescape(self, content: str | None) -> TransformResult:
        """Unescape *content*."""
        text = unescape(content)
        self._log_transform(Direction.UNESCAPE, content, text)
        return TransformResult(direction=Direction.UNESCAPE, text=text)

    def transform(
        self,
        content: str | None,
        direction: Direction | str,
    ) -> TransformResult:
        """Dispatch to :meth:`escape` or :meth:`unescape`.

        Raises
        ------
        InvalidDirectionError
            If *direction* is not a known :class:`Direction` value.
        DoubleEscapeError
            In strict mode, when escaping content that looks escaped.
        """
        resolved = self._resolve_direction(direction)
        if resolved is Direction.ESCAPE:
            return self.escape(content)
        return self.unescape(content)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    @staticmethod
    def _resolve_direction(direction: Direction | str) -> Direction:
        if isinstance(direction, Direction):
            return direction
        try:
            return Direction(str(direction).strip().lower())
        except ValueError:
            raise InvalidDirectionError(
                f"Unknown direction: {direction!r}",
                hint="Use 'escape' or 'unescape'.",
            ) from None

    def _report_prior_sequences(self, prior: tuple[str, ...]) -> None:
        listed = ", ".join(prior)
        if self._strict:
            raise DoubleEscapeError(
                f"Input already contains escape sequences: {listed}",
                hint="It may have been escaped before. "
                "Unescape it first or drop --strict.",
            )
        logger.warning(
            "Input already contains escape sequences (%s); "
            "escaping it again will nest them.",
            listed,
        )

    @staticmethod
    def _log_transform(
        direction: Direction,
        content: str | None,
        text: str,
    ) -> None:
        logger.debug(
            "%s: %d chars in, %d chars out",
            direction.value,
            len(content or ""),
            len(text),
        )
