# topmark:header:start
#
#   project      : LicenseStamp
#   file         : test_status.py
#   file_relpath : tests/pipeline/test_status.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the status enums and their coloring."""

from __future__ import annotations

from licensestamp.cli.console import ClickConsole
from licensestamp.pipeline.status import HeaderState, WriteStatus


def test_values_are_plain_labels() -> None:
    assert WriteStatus.UNCHANGED.value == "up to date"
    assert WriteStatus.REPLACED == "replaced"
    assert HeaderState.NO_SPAN_FOUND.value == "no header found"


def test_paint_without_color_returns_text_unchanged() -> None:
    assert WriteStatus.FAILED.paint("boom", enable_color=False) == "boom"


def test_paint_keeps_the_text() -> None:
    # yachalk may drop escape codes when the terminal has no color support.
    assert "done" in WriteStatus.REPLACED.paint("done")


def test_console_styles_only_when_color_is_enabled() -> None:
    plain = ClickConsole(enable_color=False)
    assert plain.styled("a.c ✓", WriteStatus.REPLACED) == "a.c ✓"
    colored = ClickConsole(enable_color=True)
    assert "a.c ✓" in colored.styled("a.c ✓", WriteStatus.REPLACED)
