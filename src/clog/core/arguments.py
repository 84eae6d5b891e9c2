"""Positional argument binding for clog.

Tokens are treated as opaque text: nothing here checks that a value names
an existing directory, and a token that looks like a flag is bound like any
other value.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from clog.exceptions import MissingArgumentsError

logger = logging.getLogger(__name__)

PROG: str = "clog"
"""Program name shown in the usage line."""

USAGE: str = f"Usage: {PROG} <input dir> <output dir>"
"""Usage line printed when arguments are missing."""


@dataclass(frozen=True, slots=True)
class Arguments:
    """The two positional arguments of a single invocation."""

    input_dir: str
    """Directory the invocation reads from."""

    output_dir: str
    """Directory the invocation writes to."""

    @classmethod
    def parse(cls, argv: Sequence[str]) -> Arguments:
        """Bind the first two tokens of *argv* (invocation name excluded).

        Tokens past the second are ignored.

        Raises
        ------
        MissingArgumentsError
            If fewer than two tokens are supplied.
        """
        if len(argv) < 2:
            logger.debug("expected 2 positional arguments, got %d", len(argv))
            raise MissingArgumentsError(USAGE)
        return cls(input_dir=argv[0], output_dir=argv[1])
