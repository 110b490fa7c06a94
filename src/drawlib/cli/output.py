"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with tables and formatted messages.
"""

from typing import Any

from rich.console import Console
from rich.table import Table
from rich.text import Text

from drawlib.domain import FlattenedPath, TextPlacementResult

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]drawlib[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator."""
    console.print(f"\n{SYM_STEP} {message}")


def print_json(data: dict[str, Any]) -> None:
    """Print a result as JSON."""
    console.print_json(data=data)


def _fmt(value: float) -> str:
    return f"{value:.2f}"


def print_path_summary(path: FlattenedPath, show_points: bool = False) -> None:
    """Print flattened path statistics.

    Args:
        path: Flattened path
        show_points: Whether to list every point with its arc length
    """
    console.print(f"  {len(path):,} points {SYM_DOT} length {_fmt(path.length)}")

    if not show_points:
        return

    table = Table(show_header=True, header_style="bold")
    table.add_column("#", justify="right")
    table.add_column("x", justify="right")
    table.add_column("y", justify="right")
    table.add_column("arc length", justify="right")
    for i, (point, s) in enumerate(zip(path.points, path.arc_lengths, strict=True)):
        table.add_row(str(i), _fmt(point.x), _fmt(point.y), _fmt(s))
    console.print(table)


def print_placement(result: TextPlacementResult) -> None:
    """Print the quads of a text placement and a summary line.

    Args:
        result: Placement result
    """
    table = Table(show_header=True, header_style="bold")
    table.add_column("char")
    table.add_column("start", justify="right")
    table.add_column("end", justify="right")
    table.add_column("lead bottom")
    table.add_column("lead top")
    table.add_column("trail top")
    table.add_column("trail bottom")

    for quad in result.quads:
        corners = [f"({_fmt(p.x)}, {_fmt(p.y)})" for p in quad.corners()]
        table.add_row(Text(repr(quad.char)), _fmt(quad.start), _fmt(quad.end), *corners)
    console.print(table)

    summary = Text("  ")
    summary.append(f"{len(result.quads)}/{result.glyph_count} glyphs placed")
    summary.append(f" {SYM_DOT} path {_fmt(result.path_length)}")
    summary.append(f" {SYM_DOT} text {_fmt(result.text_length)}")
    console.print(summary)

    if result.truncated:
        console.print(f"  [yellow]{SYM_DOT} Text truncated at the end of the path[/yellow]")
    else:
        console.print(f"  [green]{SYM_OK} All glyphs placed[/green]")


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")
