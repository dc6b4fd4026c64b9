"""code-escape — escape code-block content before embedding it in markup.

Neutralises ampersands, tag delimiters, shortcode brackets and isolated
URLs, and restores them again with :func:`unescape`.
"""

from code_escape.core.escaping import escape, unescape
from code_escape.version import __version__

__all__: list[str] = ["__version__", "escape", "unescape"]
