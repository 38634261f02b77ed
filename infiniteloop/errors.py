"""Exception types raised at the boundaries of the solver."""

from __future__ import annotations


class InfiniteLoopError(Exception):
    """Base class for every error raised by this package."""


class BoardError(InfiniteLoopError, ValueError):
    """A board violates its shape or margin invariants."""


class ParseError(BoardError):
    """Problem text could not be turned into a board."""

    def __init__(self, message: str, line: int | None = None, column: int | None = None):
        if line is not None:
            message = f"{message} (line {line}, column {column})"
        super().__init__(message)
        self.line = line
        self.column = column


class RenderError(InfiniteLoopError):
    """The rendered diagram does not fit in the requested capacity."""

    def __init__(self, capacity: int, required: int):
        super().__init__(f"diagram needs more than {capacity} bytes (at least {required})")
        self.capacity = capacity
        self.required = required


class ConfigError(InfiniteLoopError, ValueError):
    """A setting has a value that cannot be used."""


__all__ = [
    "InfiniteLoopError",
    "BoardError",
    "ParseError",
    "RenderError",
    "ConfigError",
]
