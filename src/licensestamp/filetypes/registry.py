# topmark:header:start
#
#   project      : LicenseStamp
#   file         : registry.py
#   file_relpath : src/licensestamp/filetypes/registry.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Built-in delimiter table.

The table is constructed once at import time and exposed read-only. Lookups
never fail: unknown extensions resolve to `STANDARD_RULE`, which uses
C-style ``/* ... */`` block comments.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING, Final

from licensestamp.config.logging import LicensestampLogger, get_logger
from licensestamp.filetypes.base import DelimiterPair, FileTypeRule

if TYPE_CHECKING:
    from collections.abc import Mapping

logger: LicensestampLogger = get_logger(__name__)

STANDARD_TYPE_ID: Final[str] = "standard"

STANDARD_PAIR: Final[DelimiterPair] = DelimiterPair("/*", "*/")
HTML_PAIR: Final[DelimiterPair] = DelimiterPair("<!--", "-->")

STANDARD_RULE: Final[FileTypeRule] = FileTypeRule(
    type_id=STANDARD_TYPE_ID,
    default_pair=STANDARD_PAIR,
    description="C-style block comments (fallback for unknown types)",
)

_RULES: Final[tuple[FileTypeRule, ...]] = (
    # Long-form Handlebars comments are the canonical wrapping; the short form
    # is still recognized so existing headers get normalized on replacement.
    FileTypeRule(
        type_id="hbs",
        default_pair=DelimiterPair("{{!--", "--}}"),
        alternate_pairs=(DelimiterPair("{{!", "}}"),),
        description="Handlebars templates",
    ),
    FileTypeRule(
        type_id="html",
        default_pair=HTML_PAIR,
        description="HTML documents",
    ),
    FileTypeRule(
        type_id="tpl",
        default_pair=HTML_PAIR,
        description="HTML-like templates",
    ),
    FileTypeRule(
        type_id="php",
        default_pair=STANDARD_PAIR,
        prepend_token="<?php",
        description="PHP sources (header goes after the opening tag)",
    ),
    FileTypeRule(
        type_id="json",
        default_pair=STANDARD_PAIR,
        insertable=False,
        description="JSON documents (no comment syntax, never inserted)",
    ),
)

_RULE_TABLE: Final[Mapping[str, FileTypeRule]] = MappingProxyType(
    {rule.type_id: rule for rule in _RULES}
)


def get_rule_table() -> Mapping[str, FileTypeRule]:
    """Return the read-only mapping of file type identifiers to rules.

    The fallback `STANDARD_RULE` is not part of the mapping.
    """
    return _RULE_TABLE


def resolve_rule(file_type: str | None) -> FileTypeRule:
    """Return the rule for ``file_type``, falling back to the standard rule.

    Args:
        file_type (str | None): File type identifier (extension without the
            leading dot). A leading dot is tolerated.

    Returns:
        FileTypeRule: The matching rule, or `STANDARD_RULE` for unknown types.
    """
    key: str = (file_type or "").lstrip(".")
    rule: FileTypeRule | None = _RULE_TABLE.get(key)
    if rule is None:
        logger.trace("No rule for file type %r, using the standard rule", key)
        return STANDARD_RULE
    return rule


def list_rules() -> list[FileTypeRule]:
    """Return all rules (including the standard fallback) sorted by type id."""
    return sorted([*_RULE_TABLE.values(), STANDARD_RULE], key=lambda r: r.type_id)
