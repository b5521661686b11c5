"""Errors raised for defects in the static level data."""

from __future__ import annotations


class MazeError(Exception):
    """Base class for maze game errors."""


class OutOfRangeError(MazeError, IndexError):
    """A level index outside the catalog was requested."""

    def __init__(self, index: int, count: int) -> None:
        super().__init__(f"Level index {index} out of range (0..{count - 1})")
        self.index = index
        self.count = count


class MalformedLevelError(MazeError, ValueError):
    """A level cannot be played, e.g. it has no start cell."""
