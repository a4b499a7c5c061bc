# topmark:header:start
#
#   project      : LicenseStamp
#   file         : scanner.py
#   file_relpath : src/licensestamp/pipeline/scanner.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Locate the first balanced comment block in a text.

The scan treats the delimiter pair as two opaque literal tokens and walks the
text one offset at a time. Every offset is tested for *both* tokens, because
the tokens may overlap (``{{!`` is a prefix of ``{{!--``): a single offset can
open a block and close one at the same time.

Opened blocks are kept on a stack. An end token seen at depth 1 closes the
outermost block and ends the scan; at a deeper level it closes an inner
occurrence; with an empty stack it is a stray token and is ignored.

Examples:
    ```python
    >>> locate("x /* a */ y", DelimiterPair("/*", "*/"))
    HeaderSpan(start=2, end=7)
    ```
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from licensestamp.config.logging import LicensestampLogger, get_logger

if TYPE_CHECKING:
    from licensestamp.filetypes.base import DelimiterPair

logger: LicensestampLogger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class HeaderSpan:
    """Range of a located comment block.

    Attributes:
        start (int): Offset of the first character of the start token.
        end (int): Offset of the first character of the closing end token.
    """

    start: int
    end: int

    def stop(self, pair: DelimiterPair) -> int:
        """Return the exclusive end offset, i.e. just past the closing token."""
        return self.end + len(pair.end)

    def extract(self, text: str, pair: DelimiterPair) -> str:
        """Return the block text, from the start token through the end token."""
        return text[self.start : self.stop(pair)]


def locate(text: str, pair: DelimiterPair) -> HeaderSpan | None:
    """Return the span of the first fully closed outermost comment block.

    Args:
        text (str): The text to scan.
        pair (DelimiterPair): The delimiter tokens to match.

    Returns:
        HeaderSpan | None: The span of the block opened by the earliest start
        token, closed by the first end token seen at depth 1; ``None`` when no
        such end token exists.
    """
    start_tok: str = pair.start
    end_tok: str = pair.end
    stack: list[int] = []

    for pos in range(len(text)):
        if text.startswith(start_tok, pos):
            stack.append(pos)
        if text.startswith(end_tok, pos):
            if len(stack) == 1:
                span = HeaderSpan(start=stack[0], end=pos)
                logger.trace("Located block %s with %s", span, pair)
                return span
            if stack:
                stack.pop()

    logger.trace("No closed block for %s (open: %d)", pair, len(stack))
    return None
