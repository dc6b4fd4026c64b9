"""Domain models for code-escape.

All models are immutable value objects with no behaviour beyond data
access.  They carry zero I/O and no dependencies on external packages.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


# ---------------------------------------------------------------------------
# Direction
# ---------------------------------------------------------------------------

class Direction(str, Enum):
    """Which way content is transformed."""

    ESCAPE = "escape"
    UNESCAPE = "unescape"


# ---------------------------------------------------------------------------
# Transform outcome
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class TransformResult:
    """Outcome of running content through one direction of the pipeline."""

    direction: Direction
    """The direction that produced :attr:`text`."""

    text: str
    """Transformed content."""

    prior_sequences: tuple[str, ...] = ()
    """Escape sequences that were already present in the input.

    Only populated for :attr:`Direction.ESCAPE`.
    """

    @property
    def input_looks_escaped(self) -> bool:
        return bool(self.prior_sequences)
