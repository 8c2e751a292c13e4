"""
Grid - Fixed-size, row-major 2D container.

Design principles:
- Immutable: items are a tuple, "mutations" return a new grid
- Dense: one item per coordinate, index = column + columns * row
- Safe access: out-of-bounds lookups return None instead of raising
- Generic: holds any item type (cells, coordinates, counts)
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, Generic, Iterator, TypeVar

T = TypeVar("T")

Coordinates = tuple[int, int]


def index_to_coordinates(columns: int, index: int) -> Coordinates:
    """Convert a flat index into (column, row)."""
    return index % columns, index // columns


def coordinates_to_index(columns: int, coordinates: Coordinates) -> int:
    """Convert (column, row) into a flat index."""
    return coordinates[0] + columns * coordinates[1]


@dataclass(frozen=True)
class Grid(Generic[T]):
    """
    A dense grid of items addressed by (column, row).

    Invariant: len(items) == columns * rows.
    Build grids with Grid.new(); the constructor trusts its arguments.
    """
    items: tuple[T, ...]
    columns: int
    rows: int

    @classmethod
    def new(
        cls,
        columns: int,
        rows: int,
        initialiser: Callable[[Coordinates], T],
    ) -> Grid[T]:
        """
        Build a grid by calling initialiser once per coordinate.

        The initialiser is called in index order, but must only depend
        on the coordinates it is given.
        """
        items = tuple(
            initialiser(index_to_coordinates(columns, index))
            for index in range(columns * rows)
        )
        return cls(items=items, columns=columns, rows=rows)

    def in_bounds(self, coordinates: Coordinates) -> bool:
        column, row = coordinates
        return 0 <= column < self.columns and 0 <= row < self.rows

    def get(self, coordinates: Coordinates) -> T | None:
        """Get the item at coordinates, or None if out of bounds."""
        if not self.in_bounds(coordinates):
            return None
        return self.items[coordinates_to_index(self.columns, coordinates)]

    def get_wrapping(self, coordinates: Coordinates) -> T:
        """
        Get the item at coordinates, wrapping around the edges.

        Any integer coordinates resolve, including negative ones.
        Raises IndexError on a grid with no items.
        """
        if not self.items:
            raise IndexError("Cannot wrap coordinates into an empty grid")
        column, row = coordinates
        wrapped = (column % self.columns, row % self.rows)
        return self.items[coordinates_to_index(self.columns, wrapped)]

    def with_item(self, coordinates: Coordinates, value: T) -> Grid[T]:
        """Return a new grid with the item at coordinates replaced."""
        if not self.in_bounds(coordinates):
            raise IndexError(
                f"Coordinates {coordinates} out of bounds for "
                f"{self.columns}x{self.rows} grid"
            )
        index = coordinates_to_index(self.columns, coordinates)
        items = self.items[:index] + (value,) + self.items[index + 1:]
        return Grid(items=items, columns=self.columns, rows=self.rows)

    def enumerate_items(self) -> Iterator[tuple[Coordinates, T]]:
        """Yield ((column, row), item) pairs in row-major order."""
        for index, item in enumerate(self.items):
            yield index_to_coordinates(self.columns, index), item

    def iter_rows(self) -> Iterator[tuple[T, ...]]:
        """Yield one tuple of items per row, top to bottom."""
        for row in range(self.rows):
            start = row * self.columns
            yield self.items[start:start + self.columns]

    def __len__(self) -> int:
        return len(self.items)
