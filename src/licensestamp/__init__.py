# topmark:header:start
#
#   project      : LicenseStamp
#   file         : __init__.py
#   file_relpath : src/licensestamp/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""LicenseStamp package.

LicenseStamp walks a source tree and makes sure every file carries the
canonical license header comment: stale license headers are replaced,
missing ones are inserted, and files that are already up to date are left
alone.
"""

from __future__ import annotations
