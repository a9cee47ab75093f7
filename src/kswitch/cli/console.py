"""CLI console and logging helpers.

Rich is imported lazily so bootstrap paths (``--help``, ``--version``)
never depend on it.  Diagnostics go to stderr; command results
(``-c``, ``-l``) go to stdout so they can be piped.
"""

from __future__ import annotations

import logging
from typing import Any

from kswitch.exceptions import EnvironmentError


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
	return console_class(stderr=stderr)


class _ConsoleProxy:
	"""Minimal ``print``-compatible proxy creating the console on use."""

	def __init__(self, *, stderr: bool) -> None:
		self._stderr = stderr

	def print(self, *objects: object, **kwargs: Any) -> None:
		get_rich_console(stderr=self._stderr).print(*objects, **kwargs)


console = _ConsoleProxy(stderr=True)
output = _ConsoleProxy(stderr=False)


def configure_logging(verbose: bool = False) -> None:
	"""Route log records to stderr through Rich.

	``WARNING`` and above by default; ``DEBUG`` when *verbose*.
	"""
	stderr_console = get_rich_console(stderr=True)
	from rich.logging import RichHandler

	logging.basicConfig(
		level=logging.DEBUG if verbose else logging.WARNING,
		format="%(name)s: %(message)s",
		datefmt="[%X]",
		handlers=[
			RichHandler(
				console=stderr_console,
				show_path=False,
				markup=False,
			),
		],
		force=True,
	)


def escape(text: object) -> str:
	"""Escape *text* so Rich prints square brackets literally."""
	from rich.markup import escape as rich_escape

	return rich_escape(str(text))
