"""Arc-consistency pruning of rotation candidates.

For every interior cell the four neighbours are asked which edges they
could still show towards the cell, and which they could still leave
open. A rotation of the cell survives only if every edge it shows may be
matched and every edge it hides may be left open. Sweeps repeat until
nothing changes.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from .model import FULL_MASK, Board, Direction
from .rotation import fanout, rotate, rotate180, steps

logger = logging.getLogger(__name__)

Candidates = List[List[int]]


def _neighbour_limits(board: Board, options: Candidates, row: int, col: int) -> tuple[int, int]:
    """Return ``(may_be_set, may_be_clear)`` in the frame of cell (row, col)."""
    may_be_set = 0
    may_be_clear = 0
    for direction in Direction:
        dr, dc = direction.offset
        nr, nc = row + dr, col + dc
        # the neighbour sees this cell in the opposite direction
        facing = direction.opposite.bit
        shape = board.cells[nr][nc]
        allowed = options[nr][nc]
        if fanout(shape, allowed) & facing:
            may_be_set |= facing
        if fanout(shape ^ FULL_MASK, allowed) & facing:
            may_be_clear |= facing
    return rotate180(may_be_set), rotate180(may_be_clear)


def prune_cell(board: Board, options: Candidates, row: int, col: int) -> int:
    """Compute the surviving step set of one cell without modifying ``options``."""
    may_be_set, may_be_clear = _neighbour_limits(board, options, row, col)
    shape = board.cells[row][col]
    survivors = 0
    for step in steps(options[row][col]):
        edges = rotate(shape, step)
        if (edges & ~may_be_set) == 0 and (edges | may_be_clear) == FULL_MASK:
            survivors |= 1 << step
    return survivors


def propagate(board: Board, options: Sequence[Sequence[int]]) -> Optional[Candidates]:
    """Prune ``options`` to a fixpoint.

    Returns a new candidate grid, or ``None`` when some cell runs out of
    rotations. The input grid is never modified.
    """
    grid = [list(line) for line in options]
    sweeps = 0
    changed = True
    while changed:
        changed = False
        sweeps += 1
        for row, col in board.interior():
            survivors = prune_cell(board, grid, row, col)
            if survivors != grid[row][col]:
                if survivors == 0:
                    logger.debug("contradiction at (%d, %d) after %d sweep(s)", row, col, sweeps)
                    return None
                grid[row][col] = survivors
                changed = True
    return grid


__all__ = ["Candidates", "propagate", "prune_cell"]
