"""CLI application entry point for drawlib.

This module provides the main CLI interface using Typer.
"""

from pathlib import Path
from typing import Annotated, NoReturn

import typer
from pydantic import ValidationError

from drawlib import __version__
from drawlib.cli.output import (
    console,
    print_error,
    print_header,
    print_json,
    print_path_summary,
    print_placement,
    print_step,
)
from drawlib.config import DrawLibSettings, GeometryConfig, LoggingConfig, TextConfig
from drawlib.core import DrawingStore, FixedMetrics, flatten_path
from drawlib.domain import TextPlacementResult, TextProperties, TwistedTextLabel
from drawlib.exceptions import DrawLibError
from drawlib.io import FontToolsMetrics, load_path_commands
from drawlib.utils import configure_logging

# Create the Typer app
app = typer.Typer(
    name="drawlib",
    help="Flatten vector paths and lay text out along them.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]drawlib[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Flatten vector paths and lay text out along them."""


def _check_input_file(path: Path) -> None:
    if not path.exists():
        print_error(
            f"Input file not found: {path}",
            details=f"The file '{path}' does not exist or is not accessible.",
        )
        raise typer.Exit(code=1)

    if not path.is_file():
        print_error(
            f"Input path is not a file: {path}",
            details="Please provide a path to a JSON path command file.",
        )
        raise typer.Exit(code=1)


def _invalid_options(error: ValidationError) -> NoReturn:
    details = "; ".join(
        f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
        for err in error.errors()
    )
    print_error("Invalid option value", details=details)
    raise typer.Exit(code=1)


def _setup_logging(config: LoggingConfig) -> None:
    configure_logging(
        log_file=config.log_file,
        console_level=config.log_level,
        file_level=config.file_log_level,
    )


@app.command()
def flatten(
    path_file: Annotated[
        Path,
        typer.Argument(
            help="JSON file with path commands",
            show_default=False,
        ),
    ],
    tolerance: Annotated[
        float,
        typer.Option(
            "--tolerance",
            "-t",
            help="Maximum deviation between curves and the polyline",
            min=0.001,
        ),
    ] = 0.5,
    points: Annotated[
        bool,
        typer.Option(
            "--points",
            help="List every point with its arc length",
        ),
    ] = False,
    as_json: Annotated[
        bool,
        typer.Option(
            "--json",
            help="Print the result as JSON",
        ),
    ] = False,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "WARNING",
) -> None:
    """Flatten a path into a polyline and report its arc lengths.

    Example:
        drawlib flatten curve.json --points
    """
    _check_input_file(path_file)
    try:
        settings = DrawLibSettings(
            geometry=GeometryConfig(flatten_tolerance=tolerance),
            logging=LoggingConfig(log_file=log_file, log_level=log_level),
        )
    except ValidationError as e:
        _invalid_options(e)
    _setup_logging(settings.logging)
    geometry = settings.geometry

    try:
        commands = load_path_commands(path_file)
        path = flatten_path(
            commands,
            geometry.flatten_tolerance,
            min_segment_length=geometry.min_segment_length,
            max_depth=geometry.max_subdivision_depth,
        )
    except DrawLibError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    if as_json:
        print_json(path.to_dict())
        return

    print_header(__version__)
    print_step(f"Flattened {path_file.name}")
    print_path_summary(path, show_points=points)


@app.command()
def place(
    path_file: Annotated[
        Path,
        typer.Argument(
            help="JSON file with path commands",
            show_default=False,
        ),
    ],
    text: Annotated[
        str,
        typer.Argument(
            help="Text to lay out along the path",
            show_default=False,
        ),
    ],
    font: Annotated[
        Path | None,
        typer.Option(
            "--font",
            "-f",
            help="TTF/OTF font used for metrics (default: fixed-width em boxes)",
        ),
    ] = None,
    font_size: Annotated[
        float,
        typer.Option(
            "--font-size",
            "-s",
            help="Font size in path units",
            min=0.001,
        ),
    ] = 12.0,
    halign: Annotated[
        float,
        typer.Option(
            "--halign",
            help="0 starts text at the path start, 1 ends it at the path end",
            min=0.0,
            max=1.0,
        ),
    ] = 0.0,
    valign: Annotated[
        float,
        typer.Option(
            "--valign",
            help="0 puts the glyph bottom on the path, 1 the glyph top",
            min=0.0,
            max=1.0,
        ),
    ] = 0.0,
    tolerance: Annotated[
        float,
        typer.Option(
            "--tolerance",
            "-t",
            help="Maximum deviation between curves and the polyline",
            min=0.001,
        ),
    ] = 0.5,
    as_json: Annotated[
        bool,
        typer.Option(
            "--json",
            help="Print the result as JSON",
        ),
    ] = False,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "WARNING",
) -> None:
    """Lay text out along a path and print the quad bounding each glyph.

    Glyphs that do not fit on the path are left out.

    Example:
        drawlib place curve.json "Main Street" --halign 0.5
    """
    _check_input_file(path_file)
    if font is not None:
        _check_input_file(font)

    try:
        settings = DrawLibSettings(
            geometry=GeometryConfig(flatten_tolerance=tolerance),
            text=TextConfig(halign=halign, valign=valign, font_size=font_size),
            logging=LoggingConfig(log_file=log_file, log_level=log_level),
        )
    except ValidationError as e:
        _invalid_options(e)
    _setup_logging(settings.logging)

    properties = TextProperties(
        font=str(font) if font is not None else "Sans",
        font_size=settings.text.font_size,
        halign=settings.text.halign,
        valign=settings.text.valign,
    )

    try:
        label = TwistedTextLabel(text, tuple(load_path_commands(path_file)))
        if font is not None:
            with FontToolsMetrics(font) as metrics:
                result = _place_label(label, properties, DrawingStore(metrics, settings))
        else:
            store = DrawingStore(FixedMetrics.from_config(settings.text), settings)
            result = _place_label(label, properties, store)
    except DrawLibError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    if as_json:
        print_json(result.to_dict())
        return

    print_header(__version__)
    print_step(f"Placed {len(text)} characters along {path_file.name}")
    print_placement(result)


def _place_label(
    label: TwistedTextLabel, properties: TextProperties, store: DrawingStore
) -> TextPlacementResult:
    """Record the label in the store and compute its bounds."""
    store.add_twisted_text([label], properties)
    return store.get_triangle_bounds_twisted_text(label, properties)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
