from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Iterator, Sequence, Tuple

from ..config import DEFAULT_AXIS, MIN_AXIS
from ..errors import BoardError

FULL_MASK = 0xF


class Direction(IntEnum):
    """Bit index of an edge inside a 4-bit mask.

    Rotating a shape by one step moves every edge one direction
    clockwise, which is a circular left shift of the mask.
    """
    NORTH = 0
    EAST = 1
    SOUTH = 2
    WEST = 3

    @property
    def bit(self) -> int:
        return 1 << self

    @property
    def opposite(self) -> "Direction":
        return Direction((self + 2) % 4)

    @property
    def offset(self) -> Tuple[int, int]:
        return _OFFSETS[self]


_OFFSETS = {
    Direction.NORTH: (-1, 0),
    Direction.EAST: (0, 1),
    Direction.SOUTH: (1, 0),
    Direction.WEST: (0, -1),
}


class Shape(IntEnum):
    """Canonical piece shapes in their unrotated orientation."""
    EMPTY = 0x0
    DEAD_END = 0x1
    CORNER = 0x3
    STRAIGHT = 0x5
    THREE_WAY = 0x7
    CROSS = 0xF


Cell = Tuple[int, int]
Grid = Tuple[Tuple[int, ...], ...]


@dataclass(frozen=True)
class Board:
    """Immutable square grid of piece masks indexed ``cells[row][col]``.

    The outer ring of cells is a margin that must stay empty so every
    interior cell has four real neighbours.
    """
    cells: Grid

    def __post_init__(self) -> None:
        axis = len(self.cells)
        if axis < MIN_AXIS:
            raise BoardError(f"board must be at least {MIN_AXIS} cells wide, got {axis}")
        for row, line in enumerate(self.cells):
            if len(line) != axis:
                raise BoardError(f"row {row} has {len(line)} cells, expected {axis}")
            for col, shape in enumerate(line):
                if not 0 <= shape <= FULL_MASK:
                    raise BoardError(f"cell ({row}, {col}) holds invalid mask {shape!r}")
                if shape and not self.is_interior(row, col):
                    raise BoardError(f"cell ({row}, {col}) lies on the margin but is not empty")

    @classmethod
    def empty(cls, axis: int = DEFAULT_AXIS) -> "Board":
        return cls(tuple((0,) * axis for _ in range(axis)))

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]], axis: int = DEFAULT_AXIS) -> "Board":
        """Build a board from interior rows, padding with the margin and empty cells."""
        grid = [[0] * axis for _ in range(axis)]
        for r, line in enumerate(rows, start=1):
            for c, shape in enumerate(line, start=1):
                if shape and (r > axis - 2 or c > axis - 2):
                    raise BoardError(f"cell ({r}, {c}) does not fit on a board of axis {axis}")
                if r < axis and c < axis:
                    grid[r][c] = int(shape)
        return cls(tuple(tuple(line) for line in grid))

    @property
    def axis(self) -> int:
        return len(self.cells)

    def is_interior(self, row: int, col: int) -> bool:
        return 0 < row < self.axis - 1 and 0 < col < self.axis - 1

    def interior(self) -> Iterator[Cell]:
        for row in range(1, self.axis - 1):
            for col in range(1, self.axis - 1):
                yield row, col

    def shape(self, row: int, col: int) -> int:
        return self.cells[row][col]

    def __str__(self) -> str:  # pragma: no cover - debugging aid
        return "\n".join(" ".join(f"{s:x}" for s in line) for line in self.cells)


__all__ = ["Direction", "Shape", "Board", "Cell", "Grid", "FULL_MASK"]
