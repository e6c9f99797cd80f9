"""
Manuscript Analysis Module

Line-break-normalized character counts and structural dialogue/narration
classification.
"""

from .counter import LINE_TERMINATORS, count_characters, count_file_characters
from .dialogue import QUOTE_PAIRS, QuoteScanner, classify_file, classify_text

__all__ = [
    # Counting
    "LINE_TERMINATORS",
    "count_characters",
    "count_file_characters",
    # Dialogue classification
    "QUOTE_PAIRS",
    "QuoteScanner",
    "classify_file",
    "classify_text",
]
