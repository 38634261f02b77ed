from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, Tuple

from ..errors import BoardError
from .model import Board, Direction
from .rotation import is_singleton, rotate

EdgeGrid = Tuple[Tuple[bool, ...], ...]


@dataclass(frozen=True)
class Solution:
    """Edge presence for every gap between neighbouring interior cells.

    ``horizontal[row][col]`` joins interior cell (row, col) to the cell on
    its east; ``vertical[row][col]`` joins it to the cell on its south.
    Indices are 0-based over the interior, so the board's margin does not
    appear here.
    """
    horizontal: EdgeGrid
    vertical: EdgeGrid

    @property
    def size(self) -> int:
        """Number of interior rows (and columns)."""
        return len(self.horizontal)

    def edge_mask(self, row: int, col: int) -> int:
        """Return the resolved edge mask of interior cell (row, col)."""
        last = self.size - 1
        mask = 0
        if row > 0 and self.vertical[row - 1][col]:
            mask |= Direction.NORTH.bit
        if col < last and self.horizontal[row][col]:
            mask |= Direction.EAST.bit
        if row < last and self.vertical[row][col]:
            mask |= Direction.SOUTH.bit
        if col > 0 and self.horizontal[row][col - 1]:
            mask |= Direction.WEST.bit
        return mask

    def to_board(self) -> Board:
        """Turn the solution back into a puzzle whose pieces are its own cells."""
        rows = [[self.edge_mask(r, c) for c in range(self.size)] for r in range(self.size)]
        return Board.from_rows(rows, axis=self.size + 2)

    @classmethod
    def from_edges(
        cls,
        horizontal: Sequence[Sequence[bool]],
        vertical: Sequence[Sequence[bool]],
    ) -> "Solution":
        return cls(
            tuple(tuple(bool(e) for e in line) for line in horizontal),
            tuple(tuple(bool(e) for e in line) for line in vertical),
        )


def extract_solution(board: Board, options: Sequence[Sequence[int]]) -> Solution:
    """Build the :class:`Solution` of a fully resolved candidate grid."""
    size = board.axis - 2
    resolved = [[0] * size for _ in range(size)]
    for row, col in board.interior():
        step_set = options[row][col]
        if not is_singleton(step_set):
            raise BoardError(f"cell ({row}, {col}) is not resolved: {step_set:#x}")
        step = step_set.bit_length() - 1
        resolved[row - 1][col - 1] = rotate(board.cells[row][col], step)

    horizontal = tuple(
        tuple(bool(resolved[r][c] & Direction.EAST.bit) for c in range(size - 1))
        for r in range(size)
    )
    vertical = tuple(
        tuple(bool(resolved[r][c] & Direction.SOUTH.bit) for c in range(size))
        for r in range(size - 1)
    )
    return Solution(horizontal, vertical)


__all__ = ["Solution", "EdgeGrid", "extract_solution"]
