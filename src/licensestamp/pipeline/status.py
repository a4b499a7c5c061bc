# topmark:header:start
#
#   project      : LicenseStamp
#   file         : status.py
#   file_relpath : src/licensestamp/pipeline/status.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Status enums for header processing.

Each member's ``.value`` is the human-readable label; the member also
carries the `yachalk` style used when the CLI prints a status line in color.
Compare members with ``==``.
"""

from __future__ import annotations

from enum import Enum
from typing import Callable

from yachalk import chalk

#: A yachalk style (or any callable) that decorates a string for display.
Painter = Callable[[str], str]


class StatusEnum(str, Enum):
    """String enum whose members also know how to paint text."""

    _value_: str
    _painter: Painter

    def __new__(cls, label: str, painter: Painter) -> StatusEnum:
        obj: StatusEnum = str.__new__(cls, label)
        obj._value_ = label
        obj._painter = painter
        return obj

    def paint(self, text: str, *, enable_color: bool = True) -> str:
        """Return ``text`` in this status' color, or unchanged when color is off."""
        return self._painter(text) if enable_color else text


class HeaderState(StatusEnum):
    """Outcome of header detection for a single file."""

    NO_SPAN_FOUND = ("no header found", chalk.blue)
    SPAN_FOUND_MATCHES = ("header up to date", chalk.green)
    SPAN_FOUND_DIFFERS_IS_LICENSE = ("stale license header", chalk.yellow)
    SPAN_FOUND_DIFFERS_NOT_LICENSE = ("comment found, not a license header", chalk.yellow)


class WriteStatus(StatusEnum):
    """Resulting action for a single file."""

    UNCHANGED = ("up to date", chalk.green)
    REPLACED = ("replaced", chalk.green_bright)
    INSERTED = ("inserted", chalk.green_bright)
    SKIPPED = ("skipped", chalk.yellow)
    FAILED = ("failed", chalk.red_bright)
