from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict

import yaml

from ..config import DEFAULT_AXIS
from ..core.model import Board, Shape
from ..errors import ParseError

logger = logging.getLogger(__name__)

PIECES: Dict[str, Shape] = {
    "1": Shape.DEAD_END,
    "C": Shape.CORNER,
    "S": Shape.STRAIGHT,
    "3": Shape.THREE_WAY,
    "4": Shape.CROSS,
}

YAML_SUFFIXES = (".yaml", ".yml")


def parse_problem(text: str, axis: int = DEFAULT_AXIS) -> Board:
    """Parse a text grid of piece characters into a :class:`Board`.

    A space skips a cell and a newline starts the next row. Any other
    character that is not a piece is ignored without moving the cursor,
    so ``c`` or ``s`` typed in lowercase drop a cell silently rather than
    failing.
    """
    grid = [[0] * axis for _ in range(axis)]
    row, col = 1, 1
    line, column = 1, 0
    for ch in text:
        column += 1
        if ch == " ":
            col += 1
        elif ch == "\n":
            row += 1
            col = 1
            line += 1
            column = 0
        elif ch in PIECES:
            if row >= axis - 1 or col >= axis - 1:
                raise ParseError(f"piece {ch!r} does not fit on a board of axis {axis}", line, column)
            grid[row][col] = int(PIECES[ch])
            col += 1
        else:
            logger.debug("ignoring %r at line %d, column %d", ch, line, column)
    return Board(tuple(tuple(cells) for cells in grid))


@dataclass
class Puzzle:
    text: str
    options: Dict[str, Any] = field(default_factory=dict)
    source: str = "<string>"

    def to_board(self, axis: int = DEFAULT_AXIS) -> Board:
        return parse_problem(self.text, axis)


def load_puzzle(path: str | Path) -> Puzzle:
    """Load a puzzle from a plain text grid or a YAML description.

    YAML files hold the grid under ``board`` and may carry an ``options``
    mapping with per-puzzle settings. ``-`` reads plain text from stdin.
    """
    if str(path) == "-":
        try:
            return Puzzle(text=sys.stdin.read(), source="<stdin>")
        except UnicodeDecodeError as exc:
            raise ParseError(f"<stdin>: not valid UTF-8: {exc}") from exc

    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            content = f.read()
    except UnicodeDecodeError as exc:
        raise ParseError(f"{path}: not valid UTF-8: {exc}") from exc

    if path.suffix.lower() not in YAML_SUFFIXES:
        return Puzzle(text=content, source=str(path))

    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as exc:
        raise ParseError(f"{path}: invalid YAML: {exc}") from exc
    if not isinstance(data, dict) or not isinstance(data.get("board"), str):
        raise ParseError(f"{path}: expected a mapping with a 'board' string")
    options = data.get("options") or {}
    if not isinstance(options, dict):
        raise ParseError(f"{path}: 'options' must be a mapping")

    return Puzzle(text=data["board"], options=dict(options), source=str(path))


__all__ = ["PIECES", "Puzzle", "parse_problem", "load_puzzle"]
