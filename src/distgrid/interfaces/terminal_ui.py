"""Rich terminal output for the distgrid CLI.

Provides a ``TerminalUI`` helper that wraps a Rich console: the input prompt,
distance-grid blocks and fault messages.
"""

from __future__ import annotations

from typing import IO

from rich.console import Console
from rich.text import Text
from rich.theme import Theme

from distgrid.errors import GridError
from distgrid.grid.core import Grid

# ---------------------------------------------------------------------------
# Theme
# ---------------------------------------------------------------------------

DISTGRID_THEME = Theme(
    {
        "distgrid.heading": "bold",
        "distgrid.error": "red",
        "distgrid.dim": "dim white",
    }
)


class TerminalUI:
    """Encapsulates all Rich-based rendering for the distgrid CLI."""

    def __init__(self, colour: bool = True, file: IO[str] | None = None) -> None:
        self.console = Console(
            theme=DISTGRID_THEME,
            highlight=False,
            no_color=not colour,
            file=file,
        )
        self.colour = colour

    def _heading(self, text: str) -> None:
        style = "distgrid.heading" if self.colour else ""
        self.console.print(Text(text, style=style))

    def print_prompt(self) -> None:
        """Ask for test cases on an interactive terminal."""
        self.console.print()
        self._heading("Enter test cases:")

    def print_grid(self, grid: Grid, title: str = "Matrix:") -> None:
        """Print a heading followed by the aligned grid text."""
        self.console.print()
        self._heading(title)
        # Text() keeps Rich from interpreting brackets or wrapping cells.
        self.console.print(Text(grid.render()), soft_wrap=True)
        self.console.print()

    def print_distance_grid(self, grid: Grid) -> None:
        self.print_grid(grid, title="Distance matrix:")

    def print_fault(self, error: GridError) -> None:
        """Print a fault in red, prefixed with its input line when known."""
        prefix = f"line {error.line}: " if error.line is not None else ""
        style = "distgrid.error" if self.colour else ""
        self.console.print(Text(f"{prefix}{error.message}", style=style))
