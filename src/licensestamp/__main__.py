# topmark:header:start
#
#   project      : LicenseStamp
#   file         : __main__.py
#   file_relpath : src/licensestamp/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running LicenseStamp via ``python -m licensestamp``.

Delegates to :func:`licensestamp.cli.main.cli`, so the module interface and
the ``licensestamp`` console script share a single entry point.

Examples:
    Update headers below ``src`` for PHP files only::

        python -m licensestamp --dir src --ext php
"""

from __future__ import annotations

from licensestamp.cli.main import cli

if __name__ == "__main__":
    cli()
