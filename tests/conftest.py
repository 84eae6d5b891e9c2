"""Shared pytest fixtures and configuration for the clog test suite.

Guidelines
----------
* Tests never touch the filesystem; paths are opaque strings.
* Drive the CLI through ``main(argv)`` rather than patching ``sys.argv``
  unless the console-script boundary itself is under test.
"""

from __future__ import annotations
