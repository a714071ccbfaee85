"""distgrid — distance maps for binary grids read from text streams.

Parses a line-oriented stream of test cases into validated grids and computes,
for each bitmap, the 4-connected step distance to the nearest high cell.
"""

from __future__ import annotations

__version__ = "0.1.0"

__all__ = ["__version__"]
