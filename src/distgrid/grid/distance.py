"""Distance transform for binary grids.

For every cell, computes the number of 4-connected steps to the nearest
``Colour.HIGH`` cell.  All high cells seed a worklist; cells are relaxed
until no neighbour can be improved.  Because this is label-correcting
relaxation rather than a label-setting BFS, the removal order of the
worklist does not affect the result, only the amount of work done.
"""

from __future__ import annotations

import logging
import math
import random
from collections import deque
from collections.abc import Callable
from typing import Literal

import numpy as np

from distgrid.errors import InvalidArgumentError
from distgrid.grid.bitmap import BinaryGrid, Colour
from distgrid.grid.core import Coordinate, Grid

logger = logging.getLogger(__name__)

Worklist = Literal["lifo", "fifo", "random"]
WORKLISTS: tuple[str, ...] = ("lifo", "fifo", "random")


def _make_pop(
    worklist: deque[Coordinate], discipline: str, seed: int | None
) -> Callable[[], Coordinate]:
    if discipline == "lifo":
        return worklist.pop
    if discipline == "fifo":
        return worklist.popleft
    if discipline == "random":
        rng = random.Random(seed)

        def pop_random() -> Coordinate:
            worklist.rotate(-rng.randrange(len(worklist)))
            return worklist.popleft()

        return pop_random
    raise InvalidArgumentError(
        f"Unknown worklist discipline '{discipline}'; expected one of {', '.join(WORKLISTS)}"
    )


def distance_transform(
    bitmap: Grid[int],
    worklist: Worklist = "lifo",
    seed: int | None = None,
) -> Grid[float]:
    """Return a grid of distances from each cell to the nearest high cell.

    Parameters
    ----------
    bitmap:
        A :class:`BinaryGrid`.  Any other grid is validated into one first,
        raising ``InvalidArgumentError`` on non-binary values.
    worklist:
        Removal order for pending cells: ``"lifo"`` (default), ``"fifo"`` or
        ``"random"``.
    seed:
        Seed for the ``"random"`` discipline.

    Cells are ``int`` distances, or ``math.inf`` everywhere when the bitmap
    has no high cell at all.
    """
    if not isinstance(bitmap, BinaryGrid):
        bitmap = BinaryGrid(bitmap.rows, bitmap.cols, bitmap.values)

    pending: deque[Coordinate] = deque()
    pop = _make_pop(pending, worklist, seed)

    distances = np.full((bitmap.rows, bitmap.cols), np.inf)
    for coord in bitmap.coordinates():
        if bitmap.get_value(coord) == Colour.HIGH:
            distances[coord.y, coord.x] = 0
            pending.append(coord)

    if not pending:
        return Grid.uniform(bitmap.rows, bitmap.cols, math.inf)
    if len(pending) == bitmap.size:
        return Grid.uniform(bitmap.rows, bitmap.cols, 0)

    relaxations = 0
    while pending:
        coord = pop()
        step = distances[coord.y, coord.x] + 1
        for neighbour in bitmap.neighbours(coord):
            if distances[neighbour.y, neighbour.x] > step:
                distances[neighbour.y, neighbour.x] = step
                pending.append(neighbour)
                relaxations += 1

    logger.debug(
        "Distance transform on %dx%d grid (%s): %d relaxations",
        bitmap.rows, bitmap.cols, worklist, relaxations,
    )
    return Grid(
        bitmap.rows,
        bitmap.cols,
        [int(d) if math.isfinite(d) else math.inf for d in distances.ravel().tolist()],
    )
