"""Custom exception hierarchy for clog.

All exceptions that cross layer boundaries must inherit from
:class:`ClogError`.

Hierarchy
---------
ClogError
└── MissingArgumentsError
"""

from __future__ import annotations


class ClogError(Exception):
    """Base exception for all clog errors."""


# --- Argument binding ------------------------------------------------------

class MissingArgumentsError(ClogError):
    """Raised when fewer than two positional arguments are supplied.

    The message is the usage line, printed verbatim by the CLI.
    """
