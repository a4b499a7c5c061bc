# topmark:header:start
#
#   project      : LicenseStamp
#   file         : options.py
#   file_relpath : src/licensestamp/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Reusable Click options for the LicenseStamp CLI."""

from __future__ import annotations

from pathlib import Path
from typing import Callable, ParamSpec, TypeVar

import click

from licensestamp.cli.errors import LicensestampUsageError

P = ParamSpec("P")
R = TypeVar("R")

#: Click context settings shared by LicenseStamp commands.
CONTEXT_SETTINGS = {
    "help_option_names": ["-h", "--help"],
}


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve the program-output verbosity from ``-v``/``-q`` counts.

    Args:
        verbose_count (int): Number of times ``-v`` is passed.
        quiet_count (int): Number of times ``-q`` is passed.

    Returns:
        int: ``verbose_count`` when positive, ``-quiet_count`` otherwise
        (0 when neither flag is given).

    Raises:
        LicensestampUsageError: If both flags are used together.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise LicensestampUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")
    if verbose_count > 0:
        return verbose_count
    return -quiet_count


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--verbose`` and ``--quiet`` counting options to a command."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase verbosity (print a summary and the rule used per file).",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Suppress output. -q hides up-to-date files, -qq hides all but errors.",
    )(f)
    return f


def common_file_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add the target directory and extension filter options."""
    f = click.option(
        "-d",
        "--dir",
        "directory",
        type=click.Path(file_okay=False, path_type=Path),
        default=None,
        help="Directory to update (default: current working directory).",
    )(f)
    f = click.option(
        "-e",
        "--ext",
        "extension",
        type=str,
        default=None,
        metavar="EXT",
        help="Only update files with this extension, e.g. 'php' (default: all).",
    )(f)
    return f


def common_header_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add the header text and license marker options."""
    f = click.option(
        "--header-file",
        type=click.Path(dir_okay=False, path_type=Path),
        default=None,
        help="Read the canonical header text from this file.",
    )(f)
    f = click.option(
        "--marker",
        type=str,
        default=None,
        help="Phrase that identifies a comment as a license header "
        "(case-insensitive, default: 'all rights reserved').",
    )(f)
    return f
