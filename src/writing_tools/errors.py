"""Exception types raised by Writing Tools."""

from pathlib import Path


class WritingToolsError(Exception):
    """Base class for exceptions in Writing Tools."""
    pass


class RangeValidationError(WritingToolsError, ValueError):
    """A line range that cannot be analyzed (start_line < 1, start_line > end_line, ...)."""
    pass


class ToolArgumentError(WritingToolsError, ValueError):
    """Tool arguments that are missing, blank, of the wrong type, or name an unknown tool."""
    pass


class SourceReadError(WritingToolsError, OSError):
    """A manuscript that could not be opened, read, or decoded."""

    def __init__(self, path: str | Path, reason: str, cause: BaseException | None = None):
        self.path = str(path)
        self.reason = reason
        self.cause = cause
        message = f"{reason}: {self.path}"
        if cause is not None:
            message = f"{message} ({cause})"
        super().__init__(message)
