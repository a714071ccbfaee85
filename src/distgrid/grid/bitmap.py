"""Binary grids: the two-colour specialisation of :class:`Grid`."""

from __future__ import annotations

from collections.abc import Sequence
from enum import IntEnum

from distgrid.errors import InvalidArgumentError
from distgrid.grid.core import Grid


class Colour(IntEnum):
    """Values a bitmap cell may hold."""

    LOW = 0
    HIGH = 1


COLOURS = frozenset(int(colour) for colour in Colour)


class BinaryGrid(Grid[int]):
    """Grid whose values are all ``Colour.LOW`` or ``Colour.HIGH``."""

    def __init__(self, rows: int, cols: int, values: Sequence[int]) -> None:
        super().__init__(rows, cols, values)
        for value in self.values:
            if value not in COLOURS:
                raise InvalidArgumentError(
                    f"'{value}' is not a valid bitmap colour",
                    details={"value": value},
                )

    def count(self, colour: Colour) -> int:
        """Number of cells holding ``colour``."""
        return sum(1 for value in self.values if value == colour)
