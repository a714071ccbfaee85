"""Text stream input."""

from __future__ import annotations

from distgrid.io.reader import StreamGridReader, read_grids

__all__ = ["StreamGridReader", "read_grids"]
