"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with tables and formatted messages.
"""

from rich.console import Console
from rich.table import Table
from rich.text import Text

from pillsplitter.core import SplitResult
from pillsplitter.domain import Pill
from pillsplitter.utils import EditorStats

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
    console.print(f"\n[bold]Pill Splitter[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator.

    Args:
        message: Step description message
    """
    console.print(f"\n{SYM_STEP} {message}")


def print_script_info(path: str, pill_count: int, event_count: int) -> None:
    """Print event script information.

    Args:
        path: Path to the script file
        pill_count: Number of seeded pills
        event_count: Number of pointer events
    """
    line = Text("  ")
    line.append(path)
    console.print(line)
    console.print(f"  {pill_count} pills {SYM_DOT} {event_count} events")


def _fmt(value: float) -> str:
    return f"{value:g}"


def pills_table(pills: tuple[Pill, ...] | list[Pill], title: str | None = None) -> Table:
    """Build a table of pill bounds, colors and corner radii.

    Args:
        pills: Pills to list, in stacking order
        title: Optional table title

    Returns:
        Rich table ready to print
    """
    table = Table(title=title, show_edge=False, header_style="bold")
    table.add_column("id", justify="right")
    table.add_column("x", justify="right")
    table.add_column("y", justify="right")
    table.add_column("w", justify="right")
    table.add_column("h", justify="right")
    table.add_column("radii (tl tr br bl)")
    table.add_column("color")
    for pill in pills:
        table.add_row(
            str(pill.id),
            _fmt(pill.x),
            _fmt(pill.y),
            _fmt(pill.width),
            _fmt(pill.height),
            pill.corner_radii.to_css(),
            pill.color,
        )
    return table


def print_pills(pills: tuple[Pill, ...] | list[Pill]) -> None:
    """Print the pill table, or a note if there are none."""
    if not pills:
        console.print("  No pills on canvas")
        return
    console.print(pills_table(pills))


def print_split_result(result: SplitResult) -> None:
    """Print what the split engine did to one pill.

    Args:
        result: Engine result for the pill
    """
    console.print(f"  outcome [bold]{result.outcome.value}[/bold]")
    if result.patch:
        moved = ", ".join(f"{k} → {_fmt(v)}" for k, v in result.patch.items())
        console.print(f"  shifted {SYM_DOT} {moved}")
    if result.pieces:
        table = Table(show_edge=False, header_style="bold")
        table.add_column("#", justify="right")
        table.add_column("x", justify="right")
        table.add_column("y", justify="right")
        table.add_column("w", justify="right")
        table.add_column("h", justify="right")
        table.add_column("radii (tl tr br bl)")
        for i, piece in enumerate(result.pieces, start=1):
            table.add_row(
                str(i),
                _fmt(piece.x),
                _fmt(piece.y),
                _fmt(piece.width),
                _fmt(piece.height),
                piece.corner_radii.to_css(),
            )
        console.print(table)


def print_stats(stats: EditorStats) -> None:
    """Print session statistics.

    Args:
        stats: Counters collected during the replay
    """
    console.print(
        f"  {stats.pills_created} drawn {SYM_DOT} {stats.draws_rejected} rejected "
        f"{SYM_DOT} {stats.pills_split} split {SYM_DOT} {stats.pills_shifted} shifted "
        f"{SYM_DOT} {stats.drags} drags"
    )


def print_success(message: str) -> None:
    """Print success message."""
    console.print(f"\n[bold green]{SYM_OK} {message}[/bold green]")


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")
