"""Bit arithmetic on 4-bit edge masks and rotation-step sets.

A *step set* uses one bit per quarter turn: bit ``i`` set means the
shape may still be rotated clockwise by ``i`` steps.
"""

from __future__ import annotations

from typing import Iterator, List

from .model import FULL_MASK, Board

ALL_STEPS = 0xF

# symmetry order -> step set worth trying
_SEED = {1: 0x1, 2: 0x3, 4: ALL_STEPS}


def rotate(shape: int, step: int) -> int:
    """Rotate ``shape`` clockwise by ``step`` quarter turns (0..3)."""
    return ((shape << step) | (shape >> (4 - step))) & FULL_MASK


def rotate180(shape: int) -> int:
    return rotate(shape, 2)


def steps(step_set: int) -> Iterator[int]:
    """Yield the rotation amounts contained in ``step_set``, smallest first."""
    for step in range(4):
        if step_set & (1 << step):
            yield step


def fanout(shape: int, step_set: int) -> int:
    """Union of the edges ``shape`` shows under any step in ``step_set``."""
    edges = 0
    for step in steps(step_set):
        edges |= rotate(shape, step)
    return edges


def is_singleton(step_set: int) -> bool:
    return step_set != 0 and step_set & (step_set - 1) == 0


def symmetry_order(shape: int) -> int:
    """Number of rotations of ``shape`` that give distinct edge masks."""
    if rotate(shape, 1) == shape:
        return 1
    if rotate180(shape) == shape:
        return 2
    return 4


def initial_candidates(board: Board) -> List[List[int]]:
    """Seed a candidate grid, skipping rotations that repeat an edge mask."""
    return [[_SEED[symmetry_order(shape)] for shape in line] for line in board.cells]


__all__ = [
    "ALL_STEPS",
    "rotate",
    "rotate180",
    "steps",
    "fanout",
    "is_singleton",
    "symmetry_order",
    "initial_candidates",
]
