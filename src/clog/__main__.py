"""Allow ``python -m clog`` invocation.

Delegates to the CLI error-boundary entry point so that ``python -m clog``
behaves identically to the ``clog`` console script.
"""

from __future__ import annotations

from clog.cli.app import cli

if __name__ == "__main__":
    cli()
