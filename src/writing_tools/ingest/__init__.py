"""Manuscript reading."""

from writing_tools.ingest.lines import extract_lines, iter_lines, read_lines, slice_lines

__all__ = ["extract_lines", "iter_lines", "read_lines", "slice_lines"]
