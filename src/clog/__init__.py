"""clog — input/output directory command-line shell.

Validates its two positional arguments and echoes them back.
"""

import logging

from clog.version import __version__

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__: list[str] = ["__version__"]
