"""Command-line interface for Writing Tools."""

import json
import sys
from typing import Optional

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from writing_tools import __version__
from writing_tools.config import get_settings
from writing_tools.errors import WritingToolsError
from writing_tools.logging_setup import setup_logging
from writing_tools.models.range import TextRange

console = Console()


def _range_from_options(start: Optional[int], end: Optional[int]) -> Optional[TextRange]:
    try:
        return TextRange.from_bounds(start, end)
    except WritingToolsError as exc:
        _fail(exc)


def _fail(exc: Exception) -> None:
    console.print(f"[red]Error:[/red] {escape(str(exc))}", highlight=False)
    sys.exit(1)


def _echo_json(payload: dict) -> None:
    click.echo(json.dumps(payload, ensure_ascii=False))


@click.group()
@click.version_option(version=__version__)
@click.option("--verbose", "-v", is_flag=True, help="Log analysis details to stderr")
def main(verbose: bool) -> None:
    """Writing Tools - character counts and dialogue ratios for manuscripts."""
    setup_logging("DEBUG" if verbose else get_settings().log_level)


@main.command()
@click.argument("path", type=click.Path())
@click.option("--start", "-s", type=int, help="First line to analyze (1-based)")
@click.option("--end", "-e", type=int, help="Last line to analyze (inclusive)")
@click.option("--json", "as_json", is_flag=True, help="Print the structured result as JSON")
def count(path: str, start: Optional[int], end: Optional[int], as_json: bool) -> None:
    """Count characters (excluding line breaks) in a text file."""
    from writing_tools.analysis import count_file_characters

    text_range = _range_from_options(start, end)
    try:
        result = count_file_characters(path, text_range)
    except WritingToolsError as exc:
        _fail(exc)

    if as_json:
        _echo_json(result.to_payload())
        return

    console.print(result.summary(), markup=False, highlight=False)

    table = Table(title="Character Count")
    table.add_column("Metric", style="cyan")
    table.add_column("Value", style="green", justify="right")
    if text_range:
        table.add_row("Range", text_range.label())
    table.add_row("Characters", f"{result.characters:,}")
    table.add_row("Lines", f"{result.lines:,}")
    console.print(table)


@main.command()
@click.argument("path", type=click.Path())
@click.option("--start", "-s", type=int, help="First line to analyze (1-based)")
@click.option("--end", "-e", type=int, help="Last line to analyze (inclusive)")
@click.option("--json", "as_json", is_flag=True, help="Print the structured result as JSON")
def dialogue(path: str, start: Optional[int], end: Optional[int], as_json: bool) -> None:
    """Measure how much of a text file is dialogue versus narration."""
    from writing_tools.analysis import classify_file

    text_range = _range_from_options(start, end)
    try:
        result = classify_file(path, text_range)
    except WritingToolsError as exc:
        _fail(exc)

    if as_json:
        _echo_json(result.to_payload())
        return

    console.print(result.summary(), markup=False, highlight=False)

    table = Table(title="Dialogue / Narration")
    table.add_column("Kind", style="cyan")
    table.add_column("Characters", style="green", justify="right")
    table.add_column("Ratio", style="yellow", justify="right")
    table.add_row("Dialogue", f"{result.dialogue_chars:,}", f"{result.dialogue_ratio:.1%}")
    table.add_row("Narration", f"{result.narration_chars:,}", f"{result.narration_ratio:.1%}")
    table.add_row("[bold]Total[/bold]", f"{result.total_chars:,}", "")
    console.print(table)


@main.command()
def timestamp() -> None:
    """Print the current time as YYYYMMDDHHMM."""
    from writing_tools.timestamp import current_timestamp

    click.echo(current_timestamp())


@main.command(name="tools")
def list_tools_cmd() -> None:
    """List the tools the MCP server registers."""
    from writing_tools.tools import list_tools

    table = Table(title="Registered Tools")
    table.add_column("Name", style="cyan")
    table.add_column("Description")
    for name, tool in list_tools():
        table.add_row(name, tool.description.splitlines()[0])
    console.print(table)


@main.command()
def serve() -> None:
    """Run the MCP server on stdio."""
    from writing_tools.server import run

    run()


if __name__ == "__main__":
    main()
