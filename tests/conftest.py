"""Shared test fixtures for distgrid.

Provides sample bitmaps, their expected distance matrices and a helper to
feed raw text into a reader, so individual test modules stay focused.
"""

from __future__ import annotations

from typing import Any

import pytest

from distgrid.errors import GridError
from distgrid.grid.bitmap import BinaryGrid
from distgrid.io.reader import StreamGridReader

# ---------------------------------------------------------------------------
# Bitmap fixtures
# ---------------------------------------------------------------------------

SCATTERED_BITMAP = [
    [0, 0, 0, 0, 0, 0, 0, 0, 0, 0],
    [0, 1, 0, 0, 0, 0, 0, 0, 0, 1],
    [0, 0, 0, 1, 0, 0, 0, 0, 0, 0],
    [0, 0, 0, 0, 0, 0, 1, 0, 0, 0],
    [0, 0, 0, 0, 0, 0, 0, 1, 0, 0],
    [1, 0, 0, 0, 0, 0, 1, 0, 0, 0],
    [0, 0, 0, 0, 0, 0, 0, 0, 0, 1],
    [0, 0, 1, 0, 0, 0, 0, 0, 0, 0],
    [0, 0, 0, 1, 0, 0, 0, 0, 0, 0],
    [0, 0, 0, 0, 0, 0, 0, 0, 0, 0],
]

SCATTERED_DISTANCES = [
    [2, 1, 2, 2, 3, 4, 3, 3, 2, 1],
    [1, 0, 1, 1, 2, 3, 2, 2, 1, 0],
    [2, 1, 1, 0, 1, 2, 1, 2, 2, 1],
    [2, 2, 2, 1, 2, 1, 0, 1, 2, 2],
    [1, 2, 3, 2, 3, 2, 1, 0, 1, 2],
    [0, 1, 2, 3, 2, 1, 0, 1, 2, 1],
    [1, 2, 1, 2, 3, 2, 1, 2, 1, 0],
    [2, 1, 0, 1, 2, 3, 2, 3, 2, 1],
    [3, 2, 1, 0, 1, 2, 3, 4, 3, 2],
    [4, 3, 2, 1, 2, 3, 4, 5, 4, 3],
]


@pytest.fixture()
def scattered_bitmap() -> BinaryGrid:
    """10x10 bitmap with high cells spread across it."""
    return BinaryGrid.from_rows(SCATTERED_BITMAP)


@pytest.fixture()
def scattered_distances() -> list[list[int]]:
    return [row[:] for row in SCATTERED_DISTANCES]


# ---------------------------------------------------------------------------
# Reader helpers
# ---------------------------------------------------------------------------


class RecordingReader:
    """Reader plus the grids and faults it has delivered."""

    def __init__(self, reader: StreamGridReader[Any]) -> None:
        self.reader = reader
        self.grids: list[Any] = []
        self.faults: list[GridError] = []
        reader.on_grid(self.grids.append)
        reader.on_fault(self.faults.append)

    def feed(self, text: str) -> int:
        return self.reader.consume(text.splitlines(keepends=True))

    @property
    def fault_types(self) -> list[type]:
        return [type(fault) for fault in self.faults]


@pytest.fixture()
def recording_reader() -> RecordingReader:
    """A default-factory reader that records everything it emits."""
    return RecordingReader(StreamGridReader())


@pytest.fixture()
def bitmap_reader() -> RecordingReader:
    """A reader building ``BinaryGrid`` cases."""
    return RecordingReader(StreamGridReader(BinaryGrid))
