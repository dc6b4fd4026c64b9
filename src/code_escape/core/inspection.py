"""Detection of escape sequences already present in raw content.

Content that already carries ``&amp;``, ``&lt;`` and friends was most
likely escaped once before.  Escaping it again nests the entities
(``&amp;`` becomes ``&amp;amp;``), which is rarely what the caller wants.
"""

from __future__ import annotations

import re

from code_escape.core.escaping import LINE_END, LINE_START

ESCAPE_SEQUENCES: tuple[str, ...] = (
    "&amp;",
    "&lt;",
    "&gt;",
    "&#91;",
    "&#47;&#47;",
)

_PROTOCOL_SEQUENCE = "&#47;&#47;"
_ESCAPED_ISOLATED_URL_RE = re.compile(
    LINE_START + r'\s*https?:&#47;&#47;[^\s<>"]+\s*' + LINE_END,
)


def find_escape_sequences(content: str | None) -> tuple[str, ...]:
    """Return the escape sequences found in *content*.

    Results follow :data:`ESCAPE_SEQUENCES` order without duplicates.
    The protocol sequence only counts when it forms the protocol of an
    isolated URL; elsewhere it is never produced by escaping.
    """
    if not content:
        return ()

    found: list[str] = []
    for sequence in ESCAPE_SEQUENCES:
        if sequence == _PROTOCOL_SEQUENCE:
            if _ESCAPED_ISOLATED_URL_RE.search(content):
                found.append(sequence)
        elif sequence in content:
            found.append(sequence)
    return tuple(found)


def looks_escaped(content: str | None) -> bool:
    """Return ``True`` when *content* already contains escape sequences."""
    return bool(find_escape_sequences(content))
