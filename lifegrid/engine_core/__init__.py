"""
Engine Core - Game of Life grids and generations.

The core:
1. Stores cells in an immutable, row-major Grid
2. Wraps one Grid[Cell] in a Universe
3. Steps a Universe to its next generation (bounded or toroidal)
4. Parses and serializes the '.'/'#' text format
"""

from .cell import Cell
from .errors import ParseUniverseError, InvalidCellError, MismatchedRowLengthsError
from .grid import Grid, Coordinates, index_to_coordinates, coordinates_to_index
from .universe import Universe, ToroidalUniverse, Offset, next_state

__all__ = [
    "Cell",
    "ParseUniverseError",
    "InvalidCellError",
    "MismatchedRowLengthsError",
    "Grid",
    "Coordinates",
    "index_to_coordinates",
    "coordinates_to_index",
    "Universe",
    "ToroidalUniverse",
    "Offset",
    "next_state",
]
