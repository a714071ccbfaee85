"""Generic rectangular grid container.

Values are kept in a flat row-major list.  Coordinates are ``(x, y)`` pairs
where ``x`` is the column and ``y`` the row, both zero-based.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence
from typing import Any, Generic, NamedTuple, TypeVar

import numpy as np

from distgrid.errors import InvalidArgumentError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Coordinate(NamedTuple):
    """Column/row position inside a grid."""

    x: int
    y: int


# Up, right, down, left.
NEIGHBOUR_OFFSETS: tuple[tuple[int, int], ...] = ((0, -1), (1, 0), (0, 1), (-1, 0))


class Grid(Generic[T]):
    """Rectangular grid of ``rows`` x ``cols`` values.

    Parameters
    ----------
    rows:
        Grid height, at least 1.
    cols:
        Grid width, at least 1.
    values:
        Exactly ``rows * cols`` values in row-major order.  A list is stored
        as-is (not copied) and is what :attr:`values` returns.
    """

    def __init__(self, rows: int, cols: int, values: Sequence[T]) -> None:
        if rows < 1:
            raise InvalidArgumentError("Number of rows should be >= 1")
        if cols < 1:
            raise InvalidArgumentError("Number of columns should be >= 1")
        if len(values) != rows * cols:
            raise InvalidArgumentError(
                f"Number of values should be {rows * cols}, got {len(values)}"
            )
        self.rows = rows
        self.cols = cols
        self._values: list[T] = values if isinstance(values, list) else list(values)

    # ------------------------------------------------------------------
    # Alternate constructors
    # ------------------------------------------------------------------

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[T]]) -> Grid[T]:
        """Build a grid from a list of equally long rows."""
        if not rows:
            raise InvalidArgumentError("At least one row is required")
        cols = len(rows[0])
        values: list[T] = []
        for row in rows:
            if len(row) != cols:
                raise InvalidArgumentError("Rows should all have the same width")
            values.extend(row)
        return cls(len(rows), cols, values)

    @classmethod
    def uniform(cls, rows: int, cols: int, value: T) -> Grid[T]:
        """Grid holding ``value`` at every coordinate."""
        return cls(rows, cols, [value] * (rows * cols))

    @classmethod
    def from_array(cls, array: np.ndarray) -> Grid[Any]:
        """Build a grid from a 2D numpy array."""
        if array.ndim != 2:
            raise InvalidArgumentError(f"Expected a 2D array, got {array.ndim}D")
        rows, cols = array.shape
        return cls(rows, cols, array.ravel().tolist())

    # ------------------------------------------------------------------
    # Access
    # ------------------------------------------------------------------

    @property
    def size(self) -> int:
        return self.rows * self.cols

    @property
    def values(self) -> list[T]:
        """Backing value list (live reference, treat as read-only)."""
        return self._values

    def get_values(self) -> list[T]:
        return self._values

    def in_bounds(self, coord: tuple[int, int]) -> bool:
        x, y = coord
        return 0 <= x < self.cols and 0 <= y < self.rows

    def get_value(self, coord: tuple[int, int]) -> T:
        """Value at ``(x, y)``; raises for coordinates outside the grid."""
        if not self.in_bounds(coord):
            raise InvalidArgumentError(
                f"Invalid coordinate {tuple(coord)} for {self.rows}x{self.cols} grid"
            )
        x, y = coord
        return self._values[y * self.cols + x]

    def coordinates(self) -> Iterator[Coordinate]:
        """Yield every coordinate in row-major order."""
        for index in range(self.size):
            yield Coordinate(index % self.cols, index // self.cols)

    def neighbours(self, coord: tuple[int, int]) -> Iterator[Coordinate]:
        """Yield the in-bounds 4-connected neighbours of ``coord``.

        Order is up, right, down, left.  ``coord`` itself is not checked.
        """
        x, y = coord
        for dx, dy in NEIGHBOUR_OFFSETS:
            candidate = Coordinate(x + dx, y + dy)
            if self.in_bounds(candidate):
                yield candidate

    # ------------------------------------------------------------------
    # Conversion
    # ------------------------------------------------------------------

    def to_rows(self) -> list[list[T]]:
        return [
            self._values[y * self.cols: (y + 1) * self.cols] for y in range(self.rows)
        ]

    def to_array(self) -> np.ndarray:
        """Copy the values into a ``(rows, cols)`` numpy array."""
        return np.array(self._values).reshape(self.rows, self.cols)

    def render(self) -> str:
        """Render the grid as aligned, space-separated text.

        Each column is padded to the width of its widest value; the last
        column carries no separator and rows are joined without a trailing
        newline.
        """
        cells = [[str(value) for value in row] for row in self.to_rows()]
        widths = [max(len(row[x]) for row in cells) for x in range(self.cols)]
        lines = []
        for row in cells:
            parts = [cell.ljust(width) for cell, width in zip(row, widths)]
            lines.append(" ".join(parts))
        return "\n".join(lines)

    # ------------------------------------------------------------------
    # Dunder helpers
    # ------------------------------------------------------------------

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(rows={self.rows}, cols={self.cols}, values={self._values!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return (
            self.rows == other.rows
            and self.cols == other.cols
            and self._values == other._values
        )

    __hash__ = None  # type: ignore[assignment]
