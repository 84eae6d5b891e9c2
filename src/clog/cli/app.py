"""CLI application entry point for clog.

This module is the **sole error boundary** for the application.  It
handles :class:`~clog.exceptions.MissingArgumentsError` by printing the
usage line, catches ``KeyboardInterrupt`` and any unexpected
``Exception`` in :func:`cli`, and is the only place that translates
between the domain world and the OS process exit code.
"""

from __future__ import annotations

import logging
import sys

from clog.cli import exit_codes
from clog.cli.console import console
from clog.core.arguments import Arguments
from clog.exceptions import MissingArgumentsError

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the clog CLI.

    Parameters
    ----------
    argv:
        Explicit argument list without the invocation name.  When ``None``
        (default), ``sys.argv[1:]`` is used.

    Returns
    -------
    int
        OS process exit code.
    """
    if argv is None:
        argv = sys.argv[1:]

    try:
        args = Arguments.parse(argv)
    except MissingArgumentsError as exc:
        console.line(str(exc))
        return exit_codes.GENERAL_ERROR

    logger.debug(
        "input_dir=%r output_dir=%r ignored=%d",
        args.input_dir,
        args.output_dir,
        len(argv) - 2,
    )
    console.line(f"input dir: {args.input_dir}")
    console.line(f"output dir: {args.output_dir}")
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point."""
    try:
        code = main()
        sys.exit(code)
    except KeyboardInterrupt:
        console.error("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.error(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
