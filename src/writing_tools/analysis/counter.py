"""Character counting."""

import logging
from contextlib import closing
from pathlib import Path
from typing import Optional

from writing_tools.ingest.lines import read_lines
from writing_tools.models.range import TextRange
from writing_tools.models.results import CountResult

logger = logging.getLogger(__name__)

LINE_TERMINATORS = frozenset({"\n", "\r"})


def count_characters(text: str) -> int:
    """Count code points in text, ignoring LF and CR."""
    return len(text) - text.count("\n") - text.count("\r")


def count_file_characters(
    path: str | Path,
    text_range: Optional[TextRange] = None,
    encoding: Optional[str] = None,
) -> CountResult:
    """
    Count characters and lines in a manuscript, or in a line range of it.

    The file is streamed line by line; nothing outside the current line is
    kept in memory.
    """
    characters = 0
    lines = 0

    with closing(read_lines(path, text_range, encoding)) as source:
        for line in source:
            characters += count_characters(line)
            lines += 1

    result = CountResult(path=str(path), characters=characters, lines=lines, text_range=text_range)
    logger.debug("Counted %s: characters=%d lines=%d", result.label, characters, lines)
    return result
