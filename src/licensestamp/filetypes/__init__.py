# topmark:header:start
#
#   project      : LicenseStamp
#   file         : __init__.py
#   file_relpath : src/licensestamp/filetypes/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""File type rules: comment delimiters and insertion policy per extension."""

from __future__ import annotations

from licensestamp.filetypes.base import DelimiterPair, FileTypeRule
from licensestamp.filetypes.registry import (
    STANDARD_PAIR,
    STANDARD_RULE,
    get_rule_table,
    list_rules,
    resolve_rule,
)

__all__ = [
    "STANDARD_PAIR",
    "STANDARD_RULE",
    "DelimiterPair",
    "FileTypeRule",
    "get_rule_table",
    "list_rules",
    "resolve_rule",
]
