"""Result records for character counting and dialogue classification.

Each record renders both the one-line summary and the structured payload a
tool returns, so the two can never disagree.
"""

from typing import Any, Optional

from pydantic import BaseModel, Field, computed_field

from writing_tools.models.range import TextRange


def _label(path: str, text_range: Optional[TextRange]) -> str:
    if text_range is None:
        return path
    return f"{path}:{text_range.label()}"


class CountResult(BaseModel):
    """Character and line counts for a file or a line range of it."""

    path: str
    characters: int = Field(ge=0)
    lines: int = Field(ge=0)
    text_range: Optional[TextRange] = None

    @property
    def label(self) -> str:
        return _label(self.path, self.text_range)

    def summary(self) -> str:
        """Return the human-readable one-liner."""
        if self.text_range is None:
            return f"{self.path}: {self.characters}"
        return f"{self.label} characters={self.characters} lines={self.lines}"

    def to_payload(self) -> dict[str, Any]:
        """Return the structured fields for programmatic consumers."""
        if self.text_range is None:
            return {
                "path": self.path,
                "character_count": self.characters,
                "lines": self.lines,
            }
        return {
            "path": self.path,
            "start_line": self.text_range.start_line,
            "end_line": self.text_range.end_line,
            "characters": self.characters,
            "lines": self.lines,
        }


class ClassificationResult(BaseModel):
    """Dialogue/narration character counts and the ratios derived from them."""

    path: str = ""
    dialogue_chars: int = Field(ge=0)
    narration_chars: int = Field(ge=0)
    text_range: Optional[TextRange] = None
    lines: Optional[int] = None  # lines scanned, when a range was requested

    @classmethod
    def from_counts(
        cls,
        dialogue: int,
        narration: int,
        path: str = "",
        text_range: Optional[TextRange] = None,
        lines: Optional[int] = None,
    ) -> "ClassificationResult":
        return cls(
            path=path,
            dialogue_chars=dialogue,
            narration_chars=narration,
            text_range=text_range,
            lines=lines,
        )

    @computed_field
    @property
    def total_chars(self) -> int:
        return self.dialogue_chars + self.narration_chars

    @computed_field
    @property
    def dialogue_ratio(self) -> float:
        # Empty and terminator-only input report 0.0 for both ratios.
        if self.total_chars == 0:
            return 0.0
        return self.dialogue_chars / self.total_chars

    @computed_field
    @property
    def narration_ratio(self) -> float:
        if self.total_chars == 0:
            return 0.0
        return self.narration_chars / self.total_chars

    @property
    def label(self) -> str:
        return _label(self.path, self.text_range)

    def summary(self) -> str:
        """Return the human-readable one-liner."""
        return (
            f"{self.label} dialogue={self.dialogue_chars} narration={self.narration_chars} "
            f"dialogue_ratio={self.dialogue_ratio:.4f} narration_ratio={self.narration_ratio:.4f}"
        )

    def to_payload(self) -> dict[str, Any]:
        """Return the structured fields for programmatic consumers."""
        payload: dict[str, Any] = {
            "path": self.path,
            "dialogue_chars": self.dialogue_chars,
            "narration_chars": self.narration_chars,
            "total_chars": self.total_chars,
            "dialogue_ratio": self.dialogue_ratio,
            "narration_ratio": self.narration_ratio,
        }
        if self.text_range is not None:
            payload["start_line"] = self.text_range.start_line
            payload["end_line"] = self.text_range.end_line
            payload["lines"] = self.lines
        return payload
