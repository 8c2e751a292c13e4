"""
Universe - One generation of Conway's Game of Life.

A Universe owns exactly one Grid[Cell] and nothing else.
step() is a pure function of the current generation:
every cell of the next grid is computed from the old grid only,
so there is no in-place update and no ordering dependency.

Boundary policies (one per type, never mixed):
- Universe: bounded, cells outside the grid count as dead
- ToroidalUniverse: edges wrap around, every cell has 8 neighbours
"""

from __future__ import annotations
from enum import Enum
import random
from typing import Callable, Iterator

from .cell import Cell
from .errors import MismatchedRowLengthsError
from .grid import Coordinates, Grid


class Offset(Enum):
    """The eight positions of the Moore neighbourhood, as (dx, dy)."""
    TOP_LEFT = (-1, -1)
    TOP = (0, -1)
    TOP_RIGHT = (1, -1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)
    BOTTOM_LEFT = (-1, 1)
    BOTTOM = (0, 1)
    BOTTOM_RIGHT = (1, 1)

    def apply(self, coordinates: Coordinates) -> Coordinates:
        """Return the neighbour coordinates (may be out of bounds)."""
        dx, dy = self.value
        return coordinates[0] + dx, coordinates[1] + dy


def next_state(cell: Cell, live_neighbours: int) -> Cell:
    """The Game of Life rule: survive on 2 or 3, birth on exactly 3."""
    if cell == Cell.ALIVE and live_neighbours in (2, 3):
        return Cell.ALIVE
    if cell == Cell.DEAD and live_neighbours == 3:
        return Cell.ALIVE
    return Cell.DEAD


def _random_bool() -> bool:
    return random.random() > 0.5


class Universe:
    """
    A bounded Game of Life universe.

    Neighbours outside the grid are absent and contribute nothing
    to the live-neighbour count.

    Usage:
        universe = Universe.parse("....\\n.##.\\n.##.\\n....")
        universe = universe.step()
        print(universe.to_text())
    """

    __slots__ = ("_cells",)

    def __init__(self, cells: Grid[Cell]):
        self._cells = cells

    # =========================================================================
    # Construction
    # =========================================================================

    @classmethod
    def new_empty(cls, columns: int, rows: int) -> Universe:
        """Create a universe where every cell is dead."""
        return cls(Grid.new(columns, rows, lambda _: Cell.DEAD))

    @classmethod
    def new_random(
        cls,
        columns: int,
        rows: int,
        next_bool: Callable[[], bool] | None = None,
    ) -> Universe:
        """
        Create a universe with each cell independently dead or alive.

        Args:
            columns: Width of the universe
            rows: Height of the universe
            next_bool: Source of booleans, drawn once per cell in
                row-major order. Defaults to a fair coin from `random`.
        """
        draw = next_bool or _random_bool
        return cls(Grid.new(columns, rows, lambda _: Cell.from_bool(draw())))

    @classmethod
    def parse(cls, value: str) -> Universe:
        """
        Parse a universe from its text form.

        Rows are separated by '\\n'; '.' is dead and '#' is alive.
        A single trailing newline is ignored. Empty text gives a 0x0
        universe.

        Raises:
            MismatchedRowLengthsError: a row is not as long as the first
            InvalidCellError: a character is neither '.' nor '#'
        """
        if value.endswith("\n"):
            value = value[:-1]

        if not value:
            return cls(Grid(items=(), columns=0, rows=0))

        lines = value.split("\n")
        columns = len(lines[0])
        cells: list[Cell] = []

        for line in lines:
            if len(line) != columns:
                raise MismatchedRowLengthsError(columns, len(line))
            cells.extend(Cell.from_char(char) for char in line)

        rows = len(lines) if columns else 0
        return cls(Grid(items=tuple(cells), columns=columns, rows=rows))

    # =========================================================================
    # Accessors
    # =========================================================================

    @property
    def cells(self) -> Grid[Cell]:
        """The current generation's grid (read-only)."""
        return self._cells

    @property
    def columns(self) -> int:
        return self._cells.columns

    @property
    def rows(self) -> int:
        return self._cells.rows

    def get(self, coordinates: Coordinates) -> Cell | None:
        return self._cells.get(coordinates)

    def live_cell_count(self) -> int:
        return sum(self._cells.items)

    def iter_rows(self) -> Iterator[tuple[Cell, ...]]:
        return self._cells.iter_rows()

    # =========================================================================
    # Transition rule
    # =========================================================================

    def neighbour(self, coordinates: Coordinates) -> Cell | None:
        """Look up a neighbour cell; None if it lies outside the grid."""
        return self._cells.get(coordinates)

    def count_live_neighbours(self, coordinates: Coordinates) -> int:
        """Count alive cells among the neighbour positions of coordinates."""
        total = 0
        for offset in Offset:
            cell = self.neighbour(offset.apply(coordinates))
            if cell is not None:
                total += cell
        return total

    def get_new_state(self, coordinates: Coordinates) -> Cell:
        """Compute the next state of the cell at coordinates."""
        current = self._cells.get(coordinates)
        if current is None:
            current = Cell.DEAD
        return next_state(current, self.count_live_neighbours(coordinates))

    def step(self) -> Universe:
        """Return the next generation. This universe is left unchanged."""
        return type(self)(
            Grid.new(self.columns, self.rows, self.get_new_state)
        )

    # =========================================================================
    # Serialization
    # =========================================================================

    def to_text(self) -> str:
        """One line per row, each newline-terminated. 0x0 gives ''."""
        if self.columns == 0:
            return ""
        return "".join(
            "".join(cell.to_char() for cell in row) + "\n"
            for row in self._cells.iter_rows()
        )

    def render(self) -> str:
        return self.to_text()

    def __str__(self) -> str:
        return self.to_text()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(columns={self.columns}, rows={self.rows})"

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._cells == other._cells

    def __hash__(self) -> int:
        return hash((type(self), self._cells))


class ToroidalUniverse(Universe):
    """
    A Game of Life universe whose edges wrap around.

    The neighbour left of column 0 is column `columns - 1` of the same
    row, and likewise for rows. On grids smaller than 3x3 the same cell
    can sit in several neighbour positions; it is counted once per
    position.
    """

    __slots__ = ()

    def neighbour(self, coordinates: Coordinates) -> Cell:
        return self._cells.get_wrapping(coordinates)
