"""Rich console helpers for the CLI layer.

Echoed values are user-supplied paths, so they are written straight to the
console's stream: Rich never renders them, and tabs, control characters,
markup and emoji codes reach stdout unchanged.  Only the error boundary
uses Rich rendering, and only on stderr.
"""

from __future__ import annotations

from rich.console import Console


def get_console() -> Console:
	"""Create a Rich console targeting stdout."""
	return Console()


def get_error_console() -> Console:
	"""Create a Rich console targeting stderr."""
	return Console(stderr=True)


class _ConsoleProxy:
	"""Resolve the target stream at call time so captured streams are honoured."""

	def line(self, text: str) -> None:
		"""Write *text* and a newline to stdout exactly as given."""
		print(text, file=get_console().file)

	def error(self, *objects: object) -> None:
		"""Render markup-formatted diagnostics on stderr."""
		get_error_console().print(*objects)


console = _ConsoleProxy()
