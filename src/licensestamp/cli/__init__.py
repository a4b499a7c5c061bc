# topmark:header:start
#
#   project      : LicenseStamp
#   file         : __init__.py
#   file_relpath : src/licensestamp/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Command-line interface for LicenseStamp."""
