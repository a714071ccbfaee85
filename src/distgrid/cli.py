"""distgrid CLI — Typer-based entry point.

Commands
--------
solve       Read bitmaps and print the distance matrix for each one.
render      Read integer grids and print them column-aligned.
"""

from __future__ import annotations

import enum
import logging
import sys
from pathlib import Path
from typing import Any, Callable, Optional

import typer

from distgrid.config.settings import get_settings
from distgrid.errors import GridError
from distgrid.grid.bitmap import BinaryGrid
from distgrid.grid.core import Grid
from distgrid.grid.distance import distance_transform
from distgrid.interfaces.terminal_ui import TerminalUI
from distgrid.io.reader import StreamGridReader

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="distgrid",
    help="Distance matrices for bitmaps read from text test cases.",
    add_completion=False,
)


class WorklistChoice(str, enum.Enum):
    lifo = "lifo"
    fifo = "fifo"
    random = "random"


def _setup_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else getattr(logging, get_settings().log_level)
    logging.basicConfig(
        level=level,
        format="%(asctime)s  %(name)-30s  %(levelname)-7s  %(message)s",
    )


def _run_reader(
    reader: StreamGridReader[Any],
    ui: TerminalUI,
    source: Optional[Path],
    on_grid: Callable[[Any], None],
) -> None:
    """Wire ``reader`` to the UI, feed it ``source`` (or stdin) and exit."""
    grids = 0
    faults: list[GridError] = []

    @reader.on_grid
    def _count(grid: Any) -> None:
        nonlocal grids
        grids += 1
        on_grid(grid)

    reader.on_fault(faults.append)
    reader.on_fault(ui.print_fault)

    if source is None:
        if sys.stdin.isatty():
            ui.print_prompt()
        reader.consume(sys.stdin)
    else:
        with source.open(encoding="utf-8") as handle:
            reader.consume(handle)

    logger.debug("Read %d line(s): %d grid(s), %d fault(s)", reader.line_number, grids, len(faults))
    if not reader.closed and not faults:
        logger.warning("Input ended before all declared test cases were read")
    if faults:
        raise typer.Exit(1)


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


@app.command()
def solve(
    source: Optional[Path] = typer.Argument(
        None, exists=True, dir_okay=False, help="Input file; stdin when omitted."
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
    strict: Optional[bool] = typer.Option(
        None, "--strict/--lenient", help="Require every token to be an integer."
    ),
    worklist: Optional[WorklistChoice] = typer.Option(
        None, "--worklist", "-w", help="Worklist removal order for the transform."
    ),
    seed: Optional[int] = typer.Option(None, "--seed", help="Seed for the random worklist."),
    no_colour: bool = typer.Option(False, "--no-colour", help="Disable styled output."),
) -> None:
    """Print the distance matrix of every bitmap test case."""
    _setup_logging(verbose)
    cfg = get_settings()
    ui = TerminalUI(colour=cfg.colour and not no_colour)

    discipline = worklist.value if worklist is not None else cfg.transform.worklist
    if seed is None:
        seed = cfg.transform.seed
    if strict is None:
        strict = cfg.reader.strict_tokens

    reader: StreamGridReader[BinaryGrid] = StreamGridReader(BinaryGrid, strict=strict)

    def _print_distances(bitmap: BinaryGrid) -> None:
        ui.print_distance_grid(distance_transform(bitmap, worklist=discipline, seed=seed))

    _run_reader(reader, ui, source, _print_distances)


@app.command()
def render(
    source: Optional[Path] = typer.Argument(
        None, exists=True, dir_okay=False, help="Input file; stdin when omitted."
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
    strict: Optional[bool] = typer.Option(
        None, "--strict/--lenient", help="Require every token to be an integer."
    ),
    no_colour: bool = typer.Option(False, "--no-colour", help="Disable styled output."),
) -> None:
    """Print every integer grid test case column-aligned."""
    _setup_logging(verbose)
    cfg = get_settings()
    ui = TerminalUI(colour=cfg.colour and not no_colour)
    if strict is None:
        strict = cfg.reader.strict_tokens

    reader: StreamGridReader[Grid[int]] = StreamGridReader(strict=strict)
    _run_reader(reader, ui, source, ui.print_grid)


def main() -> int:
    """Entry point for the ``distgrid`` console script."""
    app()
    return 0
