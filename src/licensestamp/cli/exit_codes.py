# topmark:header:start
#
#   project      : LicenseStamp
#   file         : exit_codes.py
#   file_relpath : src/licensestamp/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for the LicenseStamp CLI.

Values follow the BSD `sysexits` convention where practical. ``WOULD_CHANGE``
(2) signals a dry run with pending changes; Click also uses 2 for its own
usage errors, so tests must check ``result.exception is None`` as well.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the LicenseStamp CLI.

    Attributes:
        SUCCESS: Run completed; all files processed.
        FAILURE: Generic failure.
        WOULD_CHANGE: Dry run: at least one file would change.
        USAGE_ERROR: Invalid flags/args. Mirrors ``EX_USAGE (64)``.
        FILE_NOT_FOUND: Target directory missing. Mirrors ``EX_NOINPUT (66)``.
        IO_ERROR: Run completed, but at least one file could not be read or
            written. Mirrors ``EX_IOERR (74)``.
        CONFIG_ERROR: Invalid configuration. Mirrors ``EX_CONFIG (78)``.
    """

    SUCCESS = 0
    FAILURE = 1
    WOULD_CHANGE = 2

    USAGE_ERROR = 64  # EX_USAGE
    FILE_NOT_FOUND = 66  # EX_NOINPUT
    IO_ERROR = 74  # EX_IOERR
    CONFIG_ERROR = 78  # EX_CONFIG
