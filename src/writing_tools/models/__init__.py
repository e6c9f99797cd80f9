"""Data models for line ranges and analysis results."""

from writing_tools.models.range import LineSlice, TextRange
from writing_tools.models.results import ClassificationResult, CountResult

__all__ = ["ClassificationResult", "CountResult", "LineSlice", "TextRange"]
