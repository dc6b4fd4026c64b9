"""Pure escaping and unescaping transforms for embedded code content.

Every function in this module is a **pure** ``str -> str``
transformation — no I/O, no side effects, fully deterministic.

Pipeline order (enforced by :data:`ESCAPE_STEPS` and
:data:`UNESCAPE_STEPS`):

Escape
    1. Ampersands        ``&``  → ``&amp;``
    2. Tag delimiters    ``<``  → ``&lt;``, ``>`` → ``&gt;``
    3. Opening brackets  ``[``  → ``&#91;``
    4. Isolated URLs     ``https://`` → ``https:&#47;&#47;`` (first line only)

Unescape runs the inverse steps in the opposite order, starting with
the isolated URL protocol so that its entities are restored before any
ampersand is touched.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Sequence

Transform = Callable[[str], str]

# Line anchors that honour \r, \n, U+2028 and U+2029 as line breaks;
# re.MULTILINE only knows about \n.
LINE_START = r"(?<![^\r\n\u2028\u2029])"
LINE_END = r"(?![^\r\n\u2028\u2029])"

# A line holding nothing but an http(s) URL and surrounding whitespace.
_ISOLATED_URL_RE = re.compile(
    LINE_START + r'(\s*https?:)//([^\s<>"]+\s*)' + LINE_END,
)
_ESCAPED_ISOLATED_URL_RE = re.compile(
    LINE_START + r'(\s*https?:)&#47;&#47;([^\s<>"]+\s*)' + LINE_END,
)


# ---------------------------------------------------------------------------
# 1. Ampersands
# ---------------------------------------------------------------------------

def escape_ampersands(content: str) -> str:
    """Convert every ``&`` into ``&amp;``."""
    return content.replace("&", "&amp;")


def unescape_ampersands(content: str) -> str:
    """Convert every ``&amp;`` back into ``&``."""
    return content.replace("&amp;", "&")


# ---------------------------------------------------------------------------
# 2. Tag delimiters
# ---------------------------------------------------------------------------

def escape_tag_delimiters(content: str) -> str:
    """Convert ``<`` and ``>`` into ``&lt;`` and ``&gt;``."""
    return content.replace("<", "&lt;").replace(">", "&gt;")


def unescape_tag_delimiters(content: str) -> str:
    """Convert ``&lt;`` and ``&gt;`` back into ``<`` and ``>``."""
    return content.replace("&lt;", "<").replace("&gt;", ">")


# ---------------------------------------------------------------------------
# 3. Opening square brackets
# ---------------------------------------------------------------------------

def escape_opening_square_brackets(content: str) -> str:
    """Convert every ``[`` into ``&#91;``.

    Only the opening bracket is escaped, so a shortcode such as
    ``[embed]`` becomes ``&#91;embed]``.  This mirrors how a tag like
    ``<strong>`` is neutralised by escaping its delimiters.
    """
    return content.replace("[", "&#91;")


def unescape_opening_square_brackets(content: str) -> str:
    """Convert every ``&#91;`` back into ``[``."""
    return content.replace("&#91;", "[")


# ---------------------------------------------------------------------------
# 4. Protocol of isolated URLs
# ---------------------------------------------------------------------------

def escape_protocol_in_isolated_urls(content: str) -> str:
    """Escape the protocol slashes of the first isolated URL.

    An isolated URL sits on its own line, surrounded only by
    whitespace; embed processors expand such lines into rich embeds.
    ``https://youtube.com/watch?x`` becomes
    ``https:&#47;&#47;youtube.com/watch?x``.

    Only the **first** matching line is rewritten.
    """
    return _ISOLATED_URL_RE.sub(r"\1&#47;&#47;\2", content, count=1)


def unescape_protocol_in_isolated_urls(content: str) -> str:
    """Restore ``&#47;&#47;`` to ``//`` in the first isolated URL."""
    return _ESCAPED_ISOLATED_URL_RE.sub(r"\1//\2", content, count=1)


# ---------------------------------------------------------------------------
# Composite pipelines
# ---------------------------------------------------------------------------

ESCAPE_STEPS: tuple[Transform, ...] = (
    escape_ampersands,
    escape_tag_delimiters,
    escape_opening_square_brackets,
    escape_protocol_in_isolated_urls,
)

UNESCAPE_STEPS: tuple[Transform, ...] = (
    unescape_protocol_in_isolated_urls,
    unescape_opening_square_brackets,
    unescape_tag_delimiters,
    unescape_ampersands,
)


def run_pipeline(steps: Sequence[Transform], content: str | None) -> str:
    """Feed *content* through *steps* in order.

    ``None`` and the empty string are both treated as ``""``.
    """
    result = content or ""
    for step in steps:
        result = step(result)
    return result


def escape(content: str | None) -> str:
    """Escape ampersands, tag delimiters, shortcodes and isolated links."""
    return run_pipeline(ESCAPE_STEPS, content)


def unescape(content: str | None) -> str:
    """Undo :func:`escape`."""
    return run_pipeline(UNESCAPE_STEPS, content)
