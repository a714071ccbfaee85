"""Grid containers and the distance transform."""

from __future__ import annotations

from distgrid.grid.bitmap import BinaryGrid, Colour
from distgrid.grid.core import Coordinate, Grid
from distgrid.grid.distance import distance_transform

__all__ = ["BinaryGrid", "Colour", "Coordinate", "Grid", "distance_transform"]
