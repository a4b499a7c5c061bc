# topmark:header:start
#
#   project      : LicenseStamp
#   file         : errors.py
#   file_relpath : src/licensestamp/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the LicenseStamp CLI.

Raise these from the CLI layer to stop a run with a standardized message and
exit code. They prefer the project console found in the Click context and
fall back to Click's default error display.
"""

from __future__ import annotations

from typing import IO, Any

import click

from licensestamp.cli.exit_codes import ExitCode


class LicensestampError(click.ClickException):
    """Base class for all LicenseStamp CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text, without color."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available."""
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(ctx.obj, dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(f"Error: {self.format_message()}")
                return
        super().show(file)


class LicensestampUsageError(LicensestampError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class LicensestampConfigError(LicensestampError):
    """Error for configuration errors (missing/invalid/malformed config)."""

    exit_code = ExitCode.CONFIG_ERROR


class LicensestampFileNotFoundError(LicensestampError):
    """Error when the target directory cannot be enumerated."""

    exit_code = ExitCode.FILE_NOT_FOUND
