"""
Cell - The two states a Game of Life cell can be in.

Cells are plain integers (0/1) so neighbour counts are a sum,
and printable as '.' (dead) or '#' (alive).
"""

from __future__ import annotations
from enum import IntEnum

from .errors import InvalidCellError


class Cell(IntEnum):
    """State of a single cell."""
    DEAD = 0
    ALIVE = 1

    def to_char(self) -> str:
        return "#" if self is Cell.ALIVE else "."

    @classmethod
    def from_char(cls, value: str) -> Cell:
        """Parse a cell from its text form. Raises InvalidCellError."""
        if value == ".":
            return cls.DEAD
        if value == "#":
            return cls.ALIVE
        raise InvalidCellError(value)

    @classmethod
    def from_bool(cls, value: bool) -> Cell:
        return cls.ALIVE if value else cls.DEAD

    def __str__(self) -> str:
        return self.to_char()
