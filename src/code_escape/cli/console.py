"""CLI console helpers with optional Rich support.

This module intentionally avoids module-level imports of Rich so every
command keeps working, with plain output, when Rich is not installed.
Transformed content never goes through this console; it is written to
stdout or a file by :mod:`code_escape.infra.text_io`.
"""

from __future__ import annotations

import re
import sys
from typing import Any

from code_escape.exceptions import EnvironmentError


def _load_rich_console_class() -> type[Any]:
	"""Return ``rich.console.Console`` class or raise ``EnvironmentError``."""
	try:
		from rich.console import Console
	except ModuleNotFoundError as exc:
		raise EnvironmentError(
			"rich is not installed. Install with: pip install rich",
		) from exc
	return Console


def rich_available() -> bool:
	"""Return ``True`` when Rich can be imported."""
	try:
		_load_rich_console_class()
	except EnvironmentError:
		return False
	return True


def get_rich_console() -> Any:
	"""Create a Rich console instance targeting stderr."""
	console_class = _load_rich_console_class()
	return console_class(stderr=True)


class _ConsoleProxy:
	"""Minimal ``print``-compatible proxy with Rich fallback."""

	def print(self, *objects: object) -> None:
		"""Render with Rich when available, else plain stderr print."""
		try:
			rich_console = get_rich_console()
		except EnvironmentError:
			print(*(_strip_markup(obj) for obj in objects), file=sys.stderr)
			return
		rich_console.print(*objects)


# Only the style tags this CLI emits; user text in brackets is left alone.
_STYLE_TAG_RE = re.compile(r"\[/?(?:bold )?(?:red|green|yellow|cyan|dim|bold)\]")


def _strip_markup(obj: object) -> object:
	"""Drop our Rich style tags from plain strings for the fallback path."""
	if not isinstance(obj, str):
		return obj
	return _STYLE_TAG_RE.sub("", obj)


def escape_markup(text: object) -> str:
	"""Escape *text* so Rich prints square brackets in it literally.

	Without Rich the text is returned unchanged; the plain fallback
	never interprets markup.
	"""
	try:
		from rich.markup import escape
	except ModuleNotFoundError:
		return str(text)
	return escape(str(text))


console = _ConsoleProxy()
