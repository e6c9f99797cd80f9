"""
Dialogue/Narration Classification

Separate quoted speech from narration by matching Japanese quotation
brackets. The rule is purely structural: every character inside an open
bracket pair is dialogue, everything else is narration.
"""

import logging
from collections.abc import Mapping
from contextlib import closing
from pathlib import Path
from types import MappingProxyType
from typing import Optional

from writing_tools.analysis.counter import LINE_TERMINATORS
from writing_tools.ingest.lines import read_lines
from writing_tools.models.range import TextRange
from writing_tools.models.results import ClassificationResult

logger = logging.getLogger(__name__)


# Opening bracket -> the closing bracket that ends it
QUOTE_PAIRS: Mapping[str, str] = MappingProxyType({
    "「": "」",
    "『": "』",
})


class QuoteScanner:
    """Single-pass dialogue/narration tally over one or more chunks of text.

    The stack of expected closers carries across feed() calls, so a quote
    opened on one line stays open on the next. Brackets and line terminators
    are never counted.

    Usage:
        scanner = QuoteScanner()
        for line in lines:
            scanner.feed(line)
        dialogue, narration = scanner.counts
    """

    def __init__(self, quote_pairs: Mapping[str, str] = QUOTE_PAIRS):
        self.quote_pairs = quote_pairs
        self.dialogue = 0
        self.narration = 0
        self._closers: list[str] = []

    @property
    def depth(self) -> int:
        """Number of quotes currently open."""
        return len(self._closers)

    @property
    def counts(self) -> tuple[int, int]:
        return self.dialogue, self.narration

    def feed(self, text: str) -> None:
        closers = self._closers
        pairs = self.quote_pairs
        dialogue = 0
        narration = 0

        for ch in text:
            if ch in LINE_TERMINATORS:
                continue

            if closers and ch == closers[-1]:
                closers.pop()
                continue

            closer = pairs.get(ch)
            if closer is not None:
                closers.append(closer)
                continue

            # A closer that doesn't match the innermost quote is plain text.
            if closers:
                dialogue += 1
            else:
                narration += 1

        self.dialogue += dialogue
        self.narration += narration


def classify_text(text: str, quote_pairs: Mapping[str, str] = QUOTE_PAIRS) -> tuple[int, int]:
    """
    Classify every character of text as dialogue or narration.

    Unterminated quotes are tolerated: everything after an unmatched opener
    counts as dialogue.

    Returns:
        (dialogue_chars, narration_chars)
    """
    scanner = QuoteScanner(quote_pairs)
    scanner.feed(text)
    return scanner.counts


def classify_file(
    path: str | Path,
    text_range: Optional[TextRange] = None,
    encoding: Optional[str] = None,
) -> ClassificationResult:
    """
    Classify a manuscript, or a line range of it, into dialogue and narration.

    Args:
        path: Manuscript file
        text_range: Inclusive line window; None means the whole file
        encoding: Override for the configured codec

    Returns:
        ClassificationResult with counts and ratios
    """
    scanner = QuoteScanner()
    lines = 0

    with closing(read_lines(path, text_range, encoding)) as source:
        for line in source:
            scanner.feed(line)
            lines += 1

    if scanner.depth:
        logger.debug("%s ends with %d unclosed quote(s)", path, scanner.depth)

    dialogue, narration = scanner.counts
    result = ClassificationResult.from_counts(
        dialogue,
        narration,
        path=str(path),
        text_range=text_range,
        lines=lines if text_range is not None else None,
    )
    logger.debug("Classified %s: %s", result.label, result.summary())
    return result
