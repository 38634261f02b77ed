"""Backtracking search over rotation candidates.

The search alternates constraint propagation with branching on a random
undecided cell, in the style of DPLL. Each branch works on its own copy
of the candidate grid, so abandoning a branch needs no undo step.
"""

from __future__ import annotations

import logging
import random
from typing import Any, Callable, Iterator, List, Optional, Protocol, Sequence, Tuple

from .model import Board, Cell
from .propagation import Candidates, propagate
from .rotation import initial_candidates, is_singleton, steps
from .solution import Solution, extract_solution

logger = logging.getLogger(__name__)

Observer = Callable[[Solution], bool]
"""Called once per solution; return ``False`` to stop the search."""


class RandomSource(Protocol):
    def choice(self, seq: Sequence[Any]) -> Any: ...


def solve(board: Board, observer: Observer, rng: Optional[RandomSource] = None) -> bool:
    """Report every rotation assignment of ``board`` to ``observer``.

    Returns ``False`` if the observer asked to stop, ``True`` once the
    whole search space has been enumerated. A puzzle without solutions
    simply never calls the observer.

    Pending branches live on an explicit stack of frames, so the depth of
    the search is not limited by the interpreter's recursion limit.
    """
    if rng is None:
        rng = random.Random()

    emitted = 0
    branches = 0
    # each frame: (pruned grid, branching cell, steps still to try)
    stack: List[Tuple[Candidates, Cell, Iterator[int]]] = []

    def visit(options: Candidates) -> bool:
        nonlocal emitted
        pruned = propagate(board, options)
        if pruned is None:
            return True

        undecided = [
            (row, col) for row, col in board.interior() if not is_singleton(pruned[row][col])
        ]
        if not undecided:
            emitted += 1
            return bool(observer(extract_solution(board, pruned)))

        row, col = rng.choice(undecided)
        logger.debug(
            "branching on (%d, %d) with steps %s, %d cell(s) undecided",
            row, col, list(steps(pruned[row][col])), len(undecided),
        )
        stack.append((pruned, (row, col), steps(pruned[row][col])))
        return True

    completed = visit(initial_candidates(board))
    while completed and stack:
        pruned, (row, col), pending = stack[-1]
        step = next(pending, None)
        if step is None:
            stack.pop()
            continue
        branch = [list(line) for line in pruned]
        branch[row][col] = 1 << step
        branches += 1
        completed = visit(branch)

    logger.info(
        "search %s: %d solution(s), %d branch(es)",
        "finished" if completed else "stopped by observer", emitted, branches,
    )
    return completed


def enumerate_solutions(
    board: Board,
    rng: Optional[RandomSource] = None,
    limit: int | None = None,
) -> List[Solution]:
    """Collect solutions of ``board``, at most ``limit`` of them if given."""
    found: List[Solution] = []

    def collect(solution: Solution) -> bool:
        found.append(solution)
        return limit is None or len(found) < limit

    if limit is None or limit > 0:
        solve(board, collect, rng)
    return found


def count_solutions(board: Board, rng: Optional[RandomSource] = None) -> int:
    """Return how many solutions ``board`` has."""
    return len(enumerate_solutions(board, rng))


__all__ = ["Observer", "RandomSource", "solve", "enumerate_solutions", "count_solutions"]
