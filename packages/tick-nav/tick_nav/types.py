"""Shared types and errors for tick-nav."""
from __future__ import annotations

from dataclasses import dataclass

# (col, row), 0-indexed
Coord = tuple[int, int]

# Cells after the start up to and including the goal.
Path = list[Coord]


@dataclass(frozen=True)
class Cell:
    """One grid cell.

    Attributes:
        col: Column index (x).
        row: Row index (z).
        obstacle: Whether the cell blocks movement.
    """

    col: int
    row: int
    obstacle: bool = False

    @property
    def coord(self) -> Coord:
        return (self.col, self.row)


class NavError(Exception):
    """Base class for tick-nav errors."""


class InvalidGrid(NavError, ValueError):
    """Raised for empty, ragged or mis-indexed grids and out-of-bounds coords."""


class InvalidEndpoint(NavError, ValueError):
    """Raised when a route endpoint (or agent position) is an obstacle."""

    def __init__(self, coord: Coord, message: str | None = None) -> None:
        self.coord = coord
        super().__init__(message or f"{coord} is an obstacle cell")


class PathNotFound(NavError):
    """Raised by require_path when no route connects start and goal."""

    def __init__(self, start: Coord, goal: Coord) -> None:
        self.start = start
        self.goal = goal
        super().__init__(f"No path from {start} to {goal}")


class SearchLimitReached(NavError):
    """Raised when a search exceeds its max_expansions cap."""

    def __init__(self, limit: int) -> None:
        self.limit = limit
        super().__init__(f"Search exceeded {limit} expansions")
