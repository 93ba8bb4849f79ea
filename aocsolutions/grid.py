"""Directions and positions for navigating 2D grids (row first, then column)."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Direction(Enum):
    """Compass direction on a grid where rows grow southwards."""

    NORTH = "north"
    EAST = "east"
    SOUTH = "south"
    WEST = "west"

    def inverse(self) -> Direction:
        """The opposite direction."""
        return _INVERSE[self]

    def to_vector(self) -> tuple[int, int]:
        """The (row, col) step taken when moving one cell this way."""
        return _VECTORS[self]


_INVERSE = {
    Direction.NORTH: Direction.SOUTH,
    Direction.EAST: Direction.WEST,
    Direction.SOUTH: Direction.NORTH,
    Direction.WEST: Direction.EAST,
}

_VECTORS = {
    Direction.NORTH: (-1, 0),
    Direction.SOUTH: (1, 0),
    Direction.EAST: (0, 1),
    Direction.WEST: (0, -1),
}


@dataclass(frozen=True)
class Position:
    """A cell on a grid, addressed as (row, col)."""

    row: int
    col: int

    def move_direction(self, direction: Direction) -> Position:
        """The neighbouring position one step in ``direction``."""
        return self + direction.to_vector()

    def __add__(self, other: object) -> Position:
        if isinstance(other, Position):
            return Position(self.row + other.row, self.col + other.col)
        if isinstance(other, tuple) and len(other) == 2:
            row, col = other
            return Position(self.row + row, self.col + col)
        return NotImplemented