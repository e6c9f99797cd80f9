"""Line range and extracted-slice models."""

from dataclasses import dataclass
from typing import Optional

from writing_tools.errors import RangeValidationError


@dataclass(frozen=True)
class TextRange:
    """An inclusive, 1-based window of lines."""

    start_line: int
    end_line: int

    def __post_init__(self) -> None:
        for name in ("start_line", "end_line"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise RangeValidationError(f"{name} must be integer")
        if self.start_line < 1:
            raise RangeValidationError("start_line must be >= 1")
        if self.start_line > self.end_line:
            raise RangeValidationError("start_line must be <= end_line")

    @classmethod
    def from_bounds(cls, start_line: Optional[int], end_line: Optional[int]) -> Optional["TextRange"]:
        """
        Build a range from optional bounds.

        Returns None (whole file) when both bounds are missing. Supplying only
        one bound is rejected.
        """
        if start_line is None and end_line is None:
            return None
        if start_line is None or end_line is None:
            raise RangeValidationError("start_line and end_line must be given together")
        return cls(start_line, end_line)

    def contains(self, line_no: int) -> bool:
        return self.start_line <= line_no <= self.end_line

    def label(self) -> str:
        """Return the range as "start-end"."""
        return f"{self.start_line}-{self.end_line}"


@dataclass
class LineSlice:
    """Lines pulled out of a source, each followed by a single LF."""

    text: str = ""
    lines: int = 0
