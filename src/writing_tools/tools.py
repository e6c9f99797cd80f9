"""Tool catalogue and dispatch.

Each tool validates its arguments with a pydantic model, runs one analysis
and answers with a summary line plus structured fields, both rendered from the
same result object.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, Optional

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    ValidationInfo,
    field_validator,
    model_validator,
)

from writing_tools.analysis import classify_file, count_file_characters
from writing_tools.config import get_settings
from writing_tools.errors import ToolArgumentError
from writing_tools.models.range import TextRange
from writing_tools.timestamp import current_timestamp

logger = logging.getLogger(__name__)


# ============================================================================
# Arguments
# ============================================================================

class NoArguments(BaseModel):
    """Arguments for tools that take none."""

    model_config = ConfigDict(extra="forbid")


class PathArguments(BaseModel):
    """A manuscript path."""

    model_config = ConfigDict(extra="forbid")

    path: str = Field(
        min_length=1,
        description="File path to a text file. The file must exist and be readable by the server process.",
    )

    @field_validator("path")
    @classmethod
    def _path_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("path must not be blank")
        return value


class RangeArguments(PathArguments):
    """A manuscript path and an inclusive line window."""

    start_line: int = Field(ge=1, description="Starting line number (1-based).")
    end_line: int = Field(ge=1, description="Ending line number (inclusive).")

    @field_validator("start_line", "end_line", mode="before")
    @classmethod
    def _not_bool(cls, value: Any, info: ValidationInfo) -> Any:
        # JSON true/false are not line numbers
        if isinstance(value, bool):
            raise ValueError(f"{info.field_name} must be number")
        return value

    @model_validator(mode="after")
    def _ordered(self) -> "RangeArguments":
        if self.start_line > self.end_line:
            raise ValueError("start_line must be <= end_line")
        return self

    @property
    def text_range(self) -> TextRange:
        return TextRange(self.start_line, self.end_line)


# ============================================================================
# Tools
# ============================================================================

@dataclass
class ToolResponse:
    """What a tool hands back: a summary line and structured fields."""

    text: str
    data: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class Tool:
    """A callable tool with its argument model."""

    name: str
    description: str
    arguments: type[BaseModel]
    handler: Callable[[Any], ToolResponse]

    def input_schema(self) -> dict[str, Any]:
        schema = self.arguments.model_json_schema()
        schema.pop("title", None)
        schema.pop("description", None)
        schema.setdefault("properties", {})
        schema["$schema"] = "https://json-schema.org/draft/2020-12/schema"
        return schema


def _timestamp(_: NoArguments) -> ToolResponse:
    ts = current_timestamp()
    return ToolResponse(text=ts, data={"timestamp": ts})


def _count_chars(args: PathArguments) -> ToolResponse:
    result = count_file_characters(args.path)
    return ToolResponse(text=result.summary(), data=result.to_payload())


def _count_chars_range(args: RangeArguments) -> ToolResponse:
    result = count_file_characters(args.path, args.text_range)
    return ToolResponse(text=result.summary(), data=result.to_payload())


def _dialogue_ratio(args: PathArguments) -> ToolResponse:
    result = classify_file(args.path)
    return ToolResponse(text=result.summary(), data=result.to_payload())


def _dialogue_ratio_range(args: RangeArguments) -> ToolResponse:
    result = classify_file(args.path, args.text_range)
    return ToolResponse(text=result.summary(), data=result.to_payload())


_PATH_NOTES = (
    "The file must exist and be readable by the server process.\n"
    "Both absolute and relative paths are supported; relative paths are "
    "resolved from the server process working directory."
)

_DIALOGUE_NOTES = (
    "Dialogue is text enclosed by Japanese quotes such as 「...」 and 『...』. "
    "Quote symbols and line breaks are excluded from counting."
)

TOOLS: tuple[Tool, ...] = (
    Tool(
        name="timestamp",
        description="Returns the current timestamp in YYYYMMDDHHMM format.",
        arguments=NoArguments,
        handler=_timestamp,
    ),
    Tool(
        name="count_chars",
        description=(
            "Count characters in an entire UTF-8 text file, excluding line breaks.\n"
            "Use this tool for the total character count of a file.\n\n"
            'Example: {"path": "novel.txt"}\n\n'
            f"{_PATH_NOTES}\n\n"
            "To count a single section or scene, use count_chars_range."
        ),
        arguments=PathArguments,
        handler=_count_chars,
    ),
    Tool(
        name="count_chars_range",
        description=(
            "Count characters between start_line and end_line in a UTF-8 text file, "
            "excluding line breaks.\n"
            "Use this tool for the character count of a section or scene.\n\n"
            'Example: {"path": "novel.txt", "start_line": 120, "end_line": 180}\n\n'
            f"{_PATH_NOTES}\n"
            "Line numbers are 1-based and inclusive; if end_line exceeds the file "
            "length, the existing lines are counted."
        ),
        arguments=RangeArguments,
        handler=_count_chars_range,
    ),
    Tool(
        name="dialogue_ratio",
        description=(
            "Analyze an entire text file and return dialogue/narration character "
            "counts and ratios.\n"
            f"{_DIALOGUE_NOTES}\n\n"
            'Example: {"path": "novel.txt"}\n\n'
            "For scene-level analysis by line range, use dialogue_ratio_range."
        ),
        arguments=PathArguments,
        handler=_dialogue_ratio,
    ),
    Tool(
        name="dialogue_ratio_range",
        description=(
            "Analyze dialogue/narration character counts and ratios between "
            "start_line and end_line in a text file.\n"
            f"{_DIALOGUE_NOTES}\n\n"
            'Example: {"path": "novel.txt", "start_line": 120, "end_line": 180}'
        ),
        arguments=RangeArguments,
        handler=_dialogue_ratio_range,
    ),
)


def tool_name(tool: Tool, prefix: Optional[str] = None) -> str:
    """Return the public (prefixed) name of a tool."""
    if prefix is None:
        prefix = get_settings().tool_prefix
    return f"{prefix}{tool.name}"


def list_tools(prefix: Optional[str] = None) -> list[tuple[str, Tool]]:
    """Return (public name, tool) pairs in registration order."""
    return [(tool_name(tool, prefix), tool) for tool in TOOLS]


def find_tool(name: str, prefix: Optional[str] = None) -> Tool:
    for public_name, tool in list_tools(prefix):
        if public_name == name:
            return tool
    raise ToolArgumentError(f"unknown tool: {name}")


def _format_validation_error(exc: ValidationError) -> str:
    messages = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()))
        message = error.get("msg", "invalid value")
        if error.get("type") == "missing":
            message = "is required"
        messages.append(f"{location} {message}" if location else message)
    return "; ".join(messages)


def call_tool(name: str, arguments: Optional[dict[str, Any]] = None, prefix: Optional[str] = None) -> ToolResponse:
    """
    Validate arguments and run the named tool.

    Raises:
        ToolArgumentError: unknown tool or invalid arguments
        RangeValidationError: line range rejected by the analysis
        SourceReadError: manuscript could not be read
    """
    tool = find_tool(name, prefix)

    try:
        args = tool.arguments.model_validate(arguments or {})
    except ValidationError as exc:
        raise ToolArgumentError(_format_validation_error(exc)) from exc

    logger.debug("Calling %s with %s", name, args)
    return tool.handler(args)
