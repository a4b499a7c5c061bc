# topmark:header:start
#
#   project      : LicenseStamp
#   file         : renderer.py
#   file_relpath : src/licensestamp/pipeline/renderer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Render the expected header for a delimiter pair."""

from __future__ import annotations

from typing import TYPE_CHECKING

from licensestamp.filetypes import registry

if TYPE_CHECKING:
    from licensestamp.filetypes.base import DelimiterPair


def synthesize(header_text: str, pair: DelimiterPair) -> str:
    """Return the header exactly as it should appear in a file.

    The canonical header text already carries C-style ``/* ... */`` markers,
    so it is returned as-is for the standard pair. Any other pair wraps it on
    separate lines.

    Args:
        header_text (str): The canonical header text.
        pair (DelimiterPair): The delimiter pair of the target file type.

    Returns:
        str: The rendered header.
    """
    if pair == registry.STANDARD_PAIR:
        return header_text
    return f"{pair.start}\n{header_text}\n{pair.end}"
