"""Box-drawing diagrams of solutions.

Each cell is drawn as one glyph, three columns apart horizontally and
two lines apart vertically. Edges between cells are filled with ``──``
and ``│``. Whitespace is only written in front of content, so a diagram
never ends in blank lines or trailing spaces.
"""

from __future__ import annotations

from typing import List

from ..core.solution import Solution
from ..errors import RenderError

# indexed by the {north, east, south, west} edge mask of a cell
GLYPHS = (
    "", "╵", "╶", "╰", "╷", "│", "╭", "├",
    "╴", "╯", "─", "┴", "╮", "┤", "┬", "┼",
)
HORIZONTAL_FILL = "──"
VERTICAL_FILL = "│"
CELL_WIDTH = 3
CELL_HEIGHT = 2


class _Canvas:
    """Append-only text buffer with a cursor and an optional byte budget."""

    def __init__(self, capacity: int | None):
        self.capacity = capacity
        self.parts: List[str] = []
        self.used = 0
        self.x = 0
        self.y = 0

    def put(self, text: str) -> None:
        self.used += len(text.encode("utf-8"))
        if self.capacity is not None and self.used > self.capacity:
            raise RenderError(self.capacity, self.used)
        self.parts.append(text)
        if text == "\n":
            self.x = 0
            self.y += 1
        else:
            self.x += len(text)

    def move_to(self, x: int, y: int) -> None:
        while self.y < y:
            self.put("\n")
        if self.x < x:
            self.put(" " * (x - self.x))

    def getvalue(self) -> str:
        return "".join(self.parts)


def render_solution(solution: Solution, capacity: int | None = None) -> str:
    """Draw ``solution``; raise :class:`RenderError` past ``capacity`` UTF-8 bytes."""
    canvas = _Canvas(capacity)
    size = solution.size
    for row in range(size):
        for col in range(size):
            mask = solution.edge_mask(row, col)
            if not mask:
                continue
            canvas.move_to(CELL_WIDTH * col, CELL_HEIGHT * row)
            canvas.put(GLYPHS[mask])
            if col < size - 1 and solution.horizontal[row][col]:
                canvas.put(HORIZONTAL_FILL)

        if row < size - 1:
            for col in range(size):
                if solution.vertical[row][col]:
                    canvas.move_to(CELL_WIDTH * col, CELL_HEIGHT * row + 1)
                    canvas.put(VERTICAL_FILL)
    return canvas.getvalue()


__all__ = ["GLYPHS", "render_solution"]
