"""
Line-range extraction from manuscript files.

Files are read one line at a time, so memory stays proportional to the
longest line rather than to the file. A line is delimited by LF; a trailing
CR before the LF is treated as part of the terminator.
"""

import logging
from collections.abc import Iterable, Iterator
from contextlib import closing
from pathlib import Path
from typing import Optional, TextIO

from writing_tools.config import get_settings
from writing_tools.errors import SourceReadError
from writing_tools.models.range import LineSlice, TextRange

logger = logging.getLogger(__name__)


def strip_terminator(line: str) -> str:
    """Drop a trailing LF, CRLF, or the bare CR ending the last line."""
    if line.endswith("\n"):
        line = line[:-1]
    if line.endswith("\r"):
        line = line[:-1]
    return line


def iter_lines(handle: TextIO, text_range: Optional[TextRange] = None) -> Iterator[str]:
    """
    Yield the lines of an open text handle that fall inside text_range.

    Lines are yielded without their terminator. Reading stops as soon as
    end_line has been consumed; a range reaching past end-of-file simply
    yields the lines that exist.
    """
    last = text_range.end_line if text_range else None

    for line_no, raw in enumerate(iter(handle.readline, ""), start=1):
        if text_range is None or text_range.contains(line_no):
            yield strip_terminator(raw)
        if line_no == last:
            break


def read_lines(
    path: str | Path,
    text_range: Optional[TextRange] = None,
    encoding: Optional[str] = None,
) -> Iterator[str]:
    """
    Open a manuscript and yield the requested lines.

    The file is closed when the range is exhausted, on error, or when the
    generator is closed. Open, read and decode failures are raised as
    SourceReadError.
    """
    encoding = encoding or get_settings().encoding
    logger.debug("Reading %s (range=%s, encoding=%s)", path, text_range, encoding)

    try:
        # newline="\n": split on LF only and leave CR in place
        with open(path, encoding=encoding, errors="strict", newline="\n") as handle:
            yield from iter_lines(handle, text_range)
    except UnicodeDecodeError as exc:
        raise SourceReadError(path, f"failed to decode file as {encoding}", exc) from exc
    except LookupError as exc:
        raise SourceReadError(path, f"unknown encoding {encoding!r}", exc) from exc
    except FileNotFoundError as exc:
        raise SourceReadError(path, "file not found", exc) from exc
    except PermissionError as exc:
        raise SourceReadError(path, "permission denied", exc) from exc
    except OSError as exc:
        raise SourceReadError(path, "failed to read file", exc) from exc


def _collect(lines: Iterable[str]) -> LineSlice:
    parts: list[str] = []
    count = 0
    for line in lines:
        parts.append(line)
        parts.append("\n")
        count += 1
    return LineSlice(text="".join(parts), lines=count)


def slice_lines(handle: TextIO, text_range: Optional[TextRange] = None) -> LineSlice:
    """Collect the in-range lines of an open handle, each followed by one LF."""
    return _collect(iter_lines(handle, text_range))


def extract_lines(
    path: str | Path,
    text_range: Optional[TextRange] = None,
    encoding: Optional[str] = None,
) -> LineSlice:
    """Read the requested lines of a manuscript into a LineSlice."""
    with closing(read_lines(path, text_range, encoding)) as source:
        return _collect(source)
