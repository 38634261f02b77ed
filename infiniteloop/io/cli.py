"""Command-line interface."""

from __future__ import annotations

import argparse
import logging
import random
import sys
from pathlib import Path

from ..config import load_settings
from ..core.csp import solve
from ..core.solution import Solution
from ..errors import ConfigError, ParseError, RenderError
from . import parser
from .render import render_solution

logger = logging.getLogger(__name__)


def build_arg_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="infiniteloop",
        description="Enumerate the rotations that solve an edge-matching pipe puzzle",
    )
    ap.add_argument("puzzle", nargs="?", default="-", help="Puzzle text or YAML file ('-' reads stdin)")
    ap.add_argument("--seed", type=int, default=None, help="Seed for the branching order")
    ap.add_argument("--max-solutions", type=int, default=None, help="Stop after this many solutions (0 = all)")
    ap.add_argument("--capacity", type=int, default=None, help="Maximum size of a diagram in bytes")
    ap.add_argument("--axis", type=int, default=None, help="Board width including the margin")
    ap.add_argument("--config", type=Path, default=None, help="YAML settings file")
    ap.add_argument("-v", "--verbose", action="count", default=0, help="More logging (repeatable)")
    return ap


def main(argv: list[str] | None = None) -> int:
    args = build_arg_parser().parse_args(argv)

    try:
        settings = load_settings(args.config)
        puz = parser.load_puzzle(args.puzzle)
        settings = settings.merged(puz.options).merged({
            "seed": args.seed,
            "max_solutions": args.max_solutions,
            "render_capacity": args.capacity,
            "axis": args.axis,
        })
    except ConfigError as exc:
        print(f"Invalid settings: {exc}", file=sys.stderr)
        return 1
    except ParseError as exc:
        print(f"Failed to parse input: {exc}", file=sys.stderr)
        return 1
    except OSError as exc:
        print(f"Failed to read input: {exc}", file=sys.stderr)
        return 1

    level = settings.log_level
    if args.verbose:
        level = "DEBUG" if args.verbose > 1 else "INFO"
    logging.basicConfig(level=level, stream=sys.stderr, format="%(levelname)s %(name)s: %(message)s")

    try:
        board = puz.to_board(settings.axis)
    except ParseError as exc:
        print(f"Failed to parse input: {exc}", file=sys.stderr)
        return 1
    logger.info("loaded %s on a %dx%d board", puz.source, board.axis, board.axis)

    printed = 0
    render_failure: RenderError | None = None

    def print_solution(solution: Solution) -> bool:
        nonlocal printed, render_failure
        try:
            text = render_solution(solution, settings.render_capacity)
        except RenderError as exc:
            render_failure = exc
            return False
        print(f"-- SOLUTION --\n{text}")
        printed += 1
        return settings.max_solutions is None or printed < settings.max_solutions

    solve(board, print_solution, random.Random(settings.seed))

    if render_failure is not None:
        print(f"Failed to print solution: {render_failure}", file=sys.stderr)
        return 1
    logger.info("printed %d solution(s)", printed)
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
