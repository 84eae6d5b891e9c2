"""Core layer — pure argument binding.

Rules
-----
* No ``print()`` calls.
* No filesystem, network or environment access.
* No imports from ``cli``.
"""

from clog.core.arguments import PROG, USAGE, Arguments

__all__: list[str] = [
    "PROG",
    "USAGE",
    "Arguments",
]
