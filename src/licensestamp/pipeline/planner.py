# topmark:header:start
#
#   project      : LicenseStamp
#   file         : planner.py
#   file_relpath : src/licensestamp/pipeline/planner.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Decide how a file's license header must change.

`plan_update` is a pure function: it takes the file content and the resolved
`FileTypeRule` and returns an `UpdateDecision` holding both the detection
state and the updated content. Nothing here touches the file system; the
runner persists `UpdateDecision.updated` when `UpdateDecision.changed`.

Decision table:

| Detection                       | State                            | Action  |
|---------------------------------|----------------------------------|---------|
| no block for any pair           | `NO_SPAN_FOUND`                  | insert  |
| block equals expected header    | `SPAN_FOUND_MATCHES`             | none    |
| block differs, has the marker   | `SPAN_FOUND_DIFFERS_IS_LICENSE`  | replace |
| block differs, lacks the marker | `SPAN_FOUND_DIFFERS_NOT_LICENSE` | insert  |

Headers are always rendered with the rule's default pair, so a header found
through an alternate pair is normalized on replacement.
"""

from __future__ import annotations

from dataclasses import dataclass

from licensestamp.config.logging import LicensestampLogger, get_logger
from licensestamp.constants import DEFAULT_LICENSE_MARKER
from licensestamp.filetypes.base import DelimiterPair, FileTypeRule
from licensestamp.pipeline.renderer import synthesize
from licensestamp.pipeline.scanner import HeaderSpan, locate
from licensestamp.pipeline.status import HeaderState, WriteStatus

logger: LicensestampLogger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class UpdateDecision:
    """Result of planning the header update for one file.

    Attributes:
        state (HeaderState): Detection state.
        status (WriteStatus): Action taken on the content.
        expected (str): Header rendered with the rule's default pair.
        original (str): Content before the update.
        updated (str): Content after the update (equal to ``original`` when
            nothing changes).
        span (HeaderSpan | None): Located comment block, if any.
        matched_pair (DelimiterPair | None): Pair that located ``span``.
        reason (str | None): Why the file was skipped, when applicable.
    """

    state: HeaderState
    status: WriteStatus
    expected: str
    original: str
    updated: str
    span: HeaderSpan | None = None
    matched_pair: DelimiterPair | None = None
    reason: str | None = None

    @property
    def changed(self) -> bool:
        """Whether the updated content differs from the original content."""
        return self.updated != self.original


def is_license_header(comment: str, marker: str = DEFAULT_LICENSE_MARKER) -> bool:
    """Return True if ``comment`` looks like a license header.

    The check is a case-insensitive search for ``marker``. Headers phrased
    differently are not recognized and get a new header inserted instead.
    """
    return marker.casefold() in comment.casefold()


def find_header(content: str, rule: FileTypeRule) -> tuple[HeaderSpan, DelimiterPair] | None:
    """Locate an existing comment block using the rule's pairs in lookup order.

    Args:
        content (str): File content.
        rule (FileTypeRule): Rule providing the default and alternate pairs.

    Returns:
        tuple[HeaderSpan, DelimiterPair] | None: The first span found and the
        pair that found it, or ``None``.
    """
    for pair in rule.candidate_pairs:
        span: HeaderSpan | None = locate(content, pair)
        if span is not None:
            return span, pair
    return None


def insert_header(content: str, header: str, rule: FileTypeRule) -> str:
    """Return ``content`` with ``header`` inserted according to ``rule``.

    With a prepend token the header goes right after the token's first
    occurrence so the token stays first. If the token is missing, the header
    is inserted at the start of the content, like for types without a token.
    """
    token: str | None = rule.prepend_token
    if token:
        if token in content:
            return content.replace(token, f"{token}\n{header}", 1)
        logger.warning(
            "Prepend token %r not found for type %r; inserting header at file start",
            token,
            rule.type_id,
        )
    return f"{header}\n{content}"


def plan_update(
    content: str,
    rule: FileTypeRule,
    header_text: str,
    *,
    marker: str = DEFAULT_LICENSE_MARKER,
) -> UpdateDecision:
    """Plan the license header update for a file's content.

    Args:
        content (str): Current file content.
        rule (FileTypeRule): Rule resolved for the file's type.
        header_text (str): Canonical header text.
        marker (str): Phrase identifying a comment block as a license header.

    Returns:
        UpdateDecision: The detection state and resulting content.
    """
    expected: str = synthesize(header_text, rule.default_pair)

    found: tuple[HeaderSpan, DelimiterPair] | None = find_header(content, rule)
    span: HeaderSpan | None = None
    pair: DelimiterPair | None = None

    if found is None:
        state = HeaderState.NO_SPAN_FOUND
    else:
        span, pair = found
        comment: str = span.extract(content, pair)
        if comment == expected:
            logger.debug("Header up to date (span=%s)", span)
            return UpdateDecision(
                state=HeaderState.SPAN_FOUND_MATCHES,
                status=WriteStatus.UNCHANGED,
                expected=expected,
                original=content,
                updated=content,
                span=span,
                matched_pair=pair,
            )
        if is_license_header(comment, marker):
            logger.debug("Replacing stale license header (span=%s, pair=%s)", span, pair)
            return UpdateDecision(
                state=HeaderState.SPAN_FOUND_DIFFERS_IS_LICENSE,
                status=WriteStatus.REPLACED,
                expected=expected,
                original=content,
                updated=content.replace(comment, expected),
                span=span,
                matched_pair=pair,
            )
        state = HeaderState.SPAN_FOUND_DIFFERS_NOT_LICENSE

    if not rule.insertable:
        logger.debug("Type %r does not accept inserted headers", rule.type_id)
        return UpdateDecision(
            state=state,
            status=WriteStatus.SKIPPED,
            expected=expected,
            original=content,
            updated=content,
            span=span,
            matched_pair=pair,
            reason=f"headers are not inserted into '{rule.type_id}' files",
        )

    return UpdateDecision(
        state=state,
        status=WriteStatus.INSERTED,
        expected=expected,
        original=content,
        updated=insert_header(content, expected, rule),
        span=span,
        matched_pair=pair,
    )
