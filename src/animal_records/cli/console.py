"""CLI console helpers with optional Rich support.

This module intentionally avoids module-level imports of Rich so that
every command keeps working, with plain ``print`` output, when Rich is
not installed.

Two proxies are exported:

* :data:`console` — diagnostics and errors, written to stderr.
* :data:`output` — command results (names, records), written to stdout.
"""

from __future__ import annotations

import sys
from typing import Any

from animal_records.exceptions import EnvironmentError


def _load_rich_console_class() -> type[Any]:
	"""Return ``rich.console.Console`` class or raise ``EnvironmentError``."""
	try:
		from rich.console import Console
	except ModuleNotFoundError as exc:
		raise EnvironmentError(
			"rich is not installed. Install with: pip install rich",
		) from exc
	return Console


def get_rich_console(*, stderr: bool = True) -> Any:
	"""Create a Rich console instance targeting stderr or stdout."""
	console_class = _load_rich_console_class()
	return console_class(stderr=stderr, highlight=False, emoji=False)


class _ConsoleProxy:
	"""Minimal ``print``-compatible proxy with Rich fallback."""

	def __init__(self, *, stderr: bool) -> None:
		self._stderr = stderr

	def print(self, *objects: object, markup: bool = True) -> None:
		"""Render with Rich when available, else plain ``print``.

		Pass ``markup=False`` for user data that may contain square
		brackets.
		"""
		try:
			rich_console = get_rich_console(stderr=self._stderr)
		except EnvironmentError:
			print(*objects, file=sys.stderr if self._stderr else sys.stdout)
			return
		rich_console.print(*objects, markup=markup, soft_wrap=True)


def escape(text: str) -> str:
	"""Escape Rich markup in *text*; identity when Rich is not installed."""
	try:
		from rich.markup import escape as rich_escape
	except ModuleNotFoundError:
		return text
	return rich_escape(text)


console = _ConsoleProxy(stderr=True)
output = _ConsoleProxy(stderr=False)
