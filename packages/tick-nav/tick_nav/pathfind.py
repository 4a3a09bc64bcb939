"""A* pathfinding over a NavGrid."""
from __future__ import annotations

import heapq
import logging
from dataclasses import dataclass
from typing import Sequence, Union

from tick_nav.grid import NavGrid
from tick_nav.heuristics import Heuristic, resolve_heuristic
from tick_nav.types import (
    Cell,
    Coord,
    InvalidEndpoint,
    Path,
    PathNotFound,
    SearchLimitReached,
)

logger = logging.getLogger(__name__)

GridLike = Union[NavGrid, Sequence[Sequence[Cell]]]

_TIE_BREAKS = ("insertion", "heuristic")
_NO_PARENT = -1


@dataclass(frozen=True)
class SearchConfig:
    """Immutable search policy.

    The defaults reproduce the classic behaviour: squared Euclidean
    heuristic, ties broken by insertion order, closed nodes never reopened.

    Attributes:
        heuristic: Name in ``HEURISTICS`` or a callable (a, b) -> float.
        tie_break: ``"insertion"`` or ``"heuristic"`` (lowest cost_to_end
            first, then insertion order).
        reopen_closed: Reopen a closed cell reached with a strictly
            cheaper cost_from_start.
        max_expansions: Raise SearchLimitReached after this many node
            expansions. None means unbounded.
    """

    heuristic: str | Heuristic = "distance_sq"
    tie_break: str = "insertion"
    reopen_closed: bool = False
    max_expansions: int | None = None

    def __post_init__(self) -> None:
        if self.tie_break not in _TIE_BREAKS:
            raise ValueError(
                f"tie_break must be one of {_TIE_BREAKS}, got '{self.tie_break}'"
            )
        if self.max_expansions is not None and self.max_expansions < 0:
            raise ValueError(
                f"max_expansions must be >= 0, got {self.max_expansions}"
            )
        resolve_heuristic(self.heuristic)

    @classmethod
    def admissible(cls, max_expansions: int | None = None) -> SearchConfig:
        """Textbook A*: Manhattan heuristic with reopening."""
        return cls(
            heuristic="manhattan",
            reopen_closed=True,
            max_expansions=max_expansions,
        )


@dataclass(slots=True)
class SearchNode:
    """Per-call search bookkeeping. ``parent`` indexes the call's node arena."""

    coord: Coord
    cost_from_start: int
    cost_to_end: float
    parent: int = _NO_PARENT

    @property
    def cost_total(self) -> float:
        return self.cost_from_start + self.cost_to_end


def _as_grid(grid: GridLike) -> NavGrid:
    return grid if isinstance(grid, NavGrid) else NavGrid(grid)


def _check_endpoint(grid: NavGrid, coord: Coord) -> None:
    # cell() raises InvalidGrid when out of bounds
    if grid.cell(coord).obstacle:
        raise InvalidEndpoint(coord)


def _reconstruct(nodes: list[SearchNode], idx: int) -> Path:
    path: Path = []
    while nodes[idx].parent != _NO_PARENT:
        path.append(nodes[idx].coord)
        idx = nodes[idx].parent
    path.reverse()
    return path


def find_path(
    grid: GridLike,
    start: Coord,
    goal: Coord,
    config: SearchConfig | None = None,
) -> Path | None:
    """Route from start to goal over 4-connected passable cells.

    Returns the cells after ``start`` up to and including ``goal``; an
    empty list when ``start == goal``; None when no route exists.

    Both endpoints must lie inside the grid (InvalidGrid) and be passable
    (InvalidEndpoint). The grid is only read.
    """
    nav = _as_grid(grid)
    cfg = config if config is not None else SearchConfig()
    _check_endpoint(nav, start)
    _check_endpoint(nav, goal)
    if start == goal:
        return []

    heuristic = resolve_heuristic(cfg.heuristic)
    by_heuristic = cfg.tie_break == "heuristic"

    nodes: list[SearchNode] = []
    open_nodes: dict[Coord, int] = {}
    closed: dict[Coord, int] = {}
    heap: list[tuple[float, float, int]] = []

    def push(node: SearchNode) -> None:
        idx = len(nodes)
        nodes.append(node)
        open_nodes[node.coord] = idx
        tie = node.cost_to_end if by_heuristic else 0.0
        # idx doubles as the insertion counter
        heapq.heappush(heap, (node.cost_total, tie, idx))

    push(SearchNode(start, 0, heuristic(start, goal)))
    expansions = 0

    while heap:
        _, _, idx = heapq.heappop(heap)
        current = nodes[idx]
        if open_nodes.get(current.coord) != idx:
            continue  # superseded or closed
        if current.coord == goal:
            path = _reconstruct(nodes, idx)
            logger.debug(
                "path %s -> %s: %d steps, %d expansions",
                start, goal, len(path), expansions,
            )
            return path

        if cfg.max_expansions is not None and expansions >= cfg.max_expansions:
            raise SearchLimitReached(cfg.max_expansions)
        expansions += 1
        del open_nodes[current.coord]
        closed[current.coord] = idx

        for neighbor in nav.neighbors(current.coord):
            if nav.is_obstacle(neighbor):
                continue
            cost_from_start = current.cost_from_start + 1
            if neighbor in closed:
                if not (
                    cfg.reopen_closed
                    and cost_from_start < nodes[closed[neighbor]].cost_from_start
                ):
                    continue
                del closed[neighbor]
            existing = open_nodes.get(neighbor)
            if existing is not None and nodes[existing].cost_from_start <= cost_from_start:
                continue
            push(SearchNode(neighbor, cost_from_start, heuristic(neighbor, goal), idx))

    logger.debug("no path %s -> %s after %d expansions", start, goal, expansions)
    return None


def require_path(
    grid: GridLike,
    start: Coord,
    goal: Coord,
    config: SearchConfig | None = None,
) -> Path:
    """Like find_path, but raises PathNotFound instead of returning None."""
    path = find_path(grid, start, goal, config)
    if path is None:
        raise PathNotFound(start, goal)
    return path


def is_valid_path(grid: GridLike, start: Coord, path: Sequence[Coord]) -> bool:
    """True if path walks passable cells in unit cardinal steps without revisits."""
    nav = _as_grid(grid)
    prev = start
    seen = {start}
    for coord in path:
        if coord in seen or not nav.passable(coord):
            return False
        if abs(coord[0] - prev[0]) + abs(coord[1] - prev[1]) != 1:
            return False
        seen.add(coord)
        prev = coord
    return True
