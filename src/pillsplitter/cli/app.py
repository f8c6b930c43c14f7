"""CLI application entry point for pillsplitter.

This module provides the main CLI interface using Typer.
"""

import json
from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError

from pillsplitter import __version__
from pillsplitter.cli.output import (
    console,
    print_error,
    print_header,
    print_pills,
    print_script_info,
    print_split_result,
    print_stats,
    print_step,
    print_success,
)
from pillsplitter.config import GeometryConfig, LoggingConfig, PillSplitterSettings
from pillsplitter.core import (
    InteractionController,
    PillStore,
    SplitOutcome,
    pastel_color_generator,
    split_pill,
)
from pillsplitter.domain import Click, CornerRadii, Pill
from pillsplitter.exceptions import PillSplitterError, ScriptLoadError
from pillsplitter.io import dump_view, load_script
from pillsplitter.utils import EditorLogger, configure_logging

# Create the Typer app
app = typer.Typer(
    name="pillsplitter",
    help="Draw, drag and split rounded rectangles with crosshair guide lines.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Pill Splitter[/bold blue] v{__version__}")
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
    """Draw, drag and split rounded rectangles with crosshair guide lines."""


@app.command()
def replay(
    script: Annotated[
        Path,
        typer.Argument(
            help="Path to a JSON pointer-event script",
            show_default=False,
        ),
    ],
    as_json: Annotated[
        bool,
        typer.Option(
            "--json",
            help="Print the final canvas as JSON",
        ),
    ] = False,
    seed: Annotated[
        int | None,
        typer.Option(
            "--seed",
            help="Seed for the colors of drawn pills",
        ),
    ] = None,
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
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Show what every click did",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Minimal console output",
        ),
    ] = False,
) -> None:
    """Replay a recorded pointer-event script and show the resulting pills.

    Example:
        pillsplitter replay session.json

    The script seeds the canvas with pills and feeds down/move/up/click events
    through the same state machine an interactive canvas uses.
    """
    # Validate mutually exclusive options
    if verbose and quiet:
        print_error("Cannot use --verbose and --quiet together")
        raise typer.Exit(code=1)

    if not script.is_file():
        print_error(
            f"Script not found: {script}",
            details=f"The file '{script}' does not exist or is not a file.",
        )
        raise typer.Exit(code=1)

    show = not quiet and not as_json
    if show:
        print_header(__version__)

    settings = PillSplitterSettings(
        logging=LoggingConfig(log_file=log_file, log_level=log_level),
    )
    logger = configure_logging(
        log_file=settings.logging.log_file,
        console_level=settings.logging.log_level,
        file_level=settings.logging.file_log_level,
        quiet=quiet or as_json,
    )

    try:
        if show:
            print_step("Loading script")
        loaded = load_script(script)
        settings.geometry = loaded.geometry
        if show:
            print_script_info(str(script), len(loaded.pills), len(loaded.events))

        store = PillStore(settings.geometry)
        for draft in loaded.pills:
            store.add(draft)

        editor_logger = EditorLogger(logger)
        controller = InteractionController(
            store=store,
            config=settings.geometry,
            color_generator=pastel_color_generator(seed),
            logger=editor_logger,
        )

        if show:
            print_step("Replaying events")
        for event in loaded.events:
            if not isinstance(event, Click):
                controller.dispatch(event)
                continue
            results = controller.on_click(event.x, event.y)
            if verbose:
                changed = [r for r in results if r.outcome is not SplitOutcome.UNCHANGED]
                console.print(
                    f"  click ({event.x:g}, {event.y:g}) → {len(changed)} pills changed"
                )
        controller.flush()

        view = controller.snapshot()
        if as_json:
            typer.echo(dump_view(view))
            return

        if show:
            print_stats(editor_logger.stats)
            print_step("Canvas")
            print_pills(view.pills)
            print_success(f"{len(view.pills)} pills")

    except ScriptLoadError as e:
        print_error(f"Could not load script: {e.reason}")
        raise typer.Exit(code=1)
    except PillSplitterError as e:
        print_error(str(e))
        raise typer.Exit(code=1)


@app.command()
def split(
    x: Annotated[float, typer.Argument(help="Left edge of the pill")],
    y: Annotated[float, typer.Argument(help="Top edge of the pill")],
    width: Annotated[float, typer.Argument(help="Pill width")],
    height: Annotated[float, typer.Argument(help="Pill height")],
    at: Annotated[
        tuple[float, float],
        typer.Option(
            "--at",
            help="Crosshair position X Y of the click",
        ),
    ],
    min_part: Annotated[
        float,
        typer.Option(
            "--min-part",
            help="Minimum width and height of a piece",
            min=1.0,
        ),
    ] = 20.0,
    corner_radius: Annotated[
        float,
        typer.Option(
            "--corner-radius",
            "-r",
            help="Radius of rounded outer corners",
            min=0.0,
        ),
    ] = 20.0,
    as_json: Annotated[
        bool,
        typer.Option(
            "--json",
            help="Print the result as JSON",
        ),
    ] = False,
) -> None:
    """Preview how one click splits a single pill.

    Example:
        pillsplitter split 0 0 100 100 --at 50 50
    """
    try:
        geometry = GeometryConfig(
            min_part=min_part,
            min_pill=max(min_part, GeometryConfig().min_pill),
            corner_radius=corner_radius,
        )
        pill = Pill(
            id=1,
            x=x,
            y=y,
            width=width,
            height=height,
            color="",
            corner_radii=CornerRadii.uniform(corner_radius),
        )
    except ValidationError as e:
        print_error("Invalid geometry settings", details=str(e))
        raise typer.Exit(code=1)
    except PillSplitterError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    x_line, y_line = at
    result = split_pill(pill, x_line, y_line, geometry)

    if as_json:
        typer.echo(json.dumps(result.to_dict(), indent=2))
        return

    print_step(
        f"Pill {width:g}×{height:g} at ({x:g}, {y:g}), click at ({x_line:g}, {y_line:g})"
    )
    print_split_result(result)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
