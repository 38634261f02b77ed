"""Solver for edge-matching rotation ("infinity loop") puzzles."""

from __future__ import annotations

from .config import Settings, load_settings
from .core.csp import Observer, count_solutions, enumerate_solutions, solve
from .core.model import Board, Direction, Shape
from .core.rotation import initial_candidates
from .core.solution import Solution
from .errors import BoardError, ConfigError, InfiniteLoopError, ParseError, RenderError
from .io.parser import Puzzle, load_puzzle, parse_problem
from .io.render import render_solution

__all__ = [
    "Board",
    "Direction",
    "Shape",
    "Solution",
    "Observer",
    "Puzzle",
    "Settings",
    "solve",
    "enumerate_solutions",
    "count_solutions",
    "initial_candidates",
    "parse_problem",
    "load_puzzle",
    "render_solution",
    "load_settings",
    "InfiniteLoopError",
    "BoardError",
    "ParseError",
    "RenderError",
    "ConfigError",
]
