"""tick-nav - Grid pathfinding and agent routing."""
from __future__ import annotations

from tick_nav.types import (
    Cell,
    Coord,
    InvalidEndpoint,
    InvalidGrid,
    NavError,
    Path,
    PathNotFound,
    SearchLimitReached,
)
from tick_nav.grid import NavGrid
from tick_nav.heuristics import HEURISTICS, Heuristic, distance_sq, manhattan, resolve_heuristic
from tick_nav.pathfind import SearchConfig, SearchNode, find_path, is_valid_path, require_path
from tick_nav.config import NavConfig
from tick_nav.builder import GridBuilder
from tick_nav.agent import Walker
from tick_nav.logconfig import configure_logging

__all__ = [
    "Cell",
    "Coord",
    "GridBuilder",
    "HEURISTICS",
    "Heuristic",
    "InvalidEndpoint",
    "InvalidGrid",
    "NavConfig",
    "NavError",
    "NavGrid",
    "Path",
    "PathNotFound",
    "SearchConfig",
    "SearchLimitReached",
    "SearchNode",
    "Walker",
    "configure_logging",
    "distance_sq",
    "find_path",
    "is_valid_path",
    "manhattan",
    "require_path",
    "resolve_heuristic",
]
