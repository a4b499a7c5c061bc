# topmark:header:start
#
#   project      : LicenseStamp
#   file         : base.py
#   file_relpath : src/licensestamp/filetypes/base.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Value types describing how license headers are delimited per file type.

A `FileTypeRule` bundles everything the header updater needs to know about a
file type: the comment delimiter pair used to render headers, alternate pairs
that may be recognized in existing files, an optional token that must stay
first in the file (e.g. ``<?php``), and whether headers may be inserted at
all.

Delimiters are opaque literal tokens; no language grammar is involved.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class DelimiterPair:
    """A pair of literal comment delimiter tokens.

    Attributes:
        start (str): Token opening a comment block (e.g. ``"/*"``).
        end (str): Token closing a comment block (e.g. ``"*/"``).
    """

    start: str
    end: str

    def __post_init__(self) -> None:
        if not self.start or not self.end:
            raise ValueError("Delimiter tokens must be non-empty strings")

    def __str__(self) -> str:
        return f"{self.start} ... {self.end}"


@dataclass(frozen=True, slots=True)
class FileTypeRule:
    """Header rule for a single file type.

    Attributes:
        type_id (str): Identifier of the file type, i.e. the file extension
            without leading dot, or ``"standard"`` for the fallback rule.
        default_pair (DelimiterPair): Pair used to render (and first to
            locate) the header.
        alternate_pairs (tuple[DelimiterPair, ...]): Pairs tried in order
            when the default pair does not locate a header in the file.
        prepend_token (str | None): Token that must remain first in the file;
            inserted headers go right after its first occurrence.
        insertable (bool): When False, headers are never inserted into files
            of this type (existing headers may still be replaced).
        description (str): Human-readable description.
    """

    type_id: str
    default_pair: DelimiterPair
    alternate_pairs: tuple[DelimiterPair, ...] = field(default_factory=tuple)
    prepend_token: str | None = None
    insertable: bool = True
    description: str = ""

    @property
    def candidate_pairs(self) -> tuple[DelimiterPair, ...]:
        """Return the default pair followed by the alternate pairs, in lookup order."""
        return (self.default_pair, *self.alternate_pairs)
