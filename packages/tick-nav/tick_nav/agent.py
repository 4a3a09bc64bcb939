"""Walker - moves an agent cell by cell along planned routes."""
from __future__ import annotations

import logging

from tick_nav.config import NavConfig
from tick_nav.grid import NavGrid
from tick_nav.pathfind import find_path
from tick_nav.types import Coord, InvalidEndpoint, Path

logger = logging.getLogger(__name__)

IDLE = "idle"
WALK = "walk"


class Walker:
    """Agent controller for a single grid-bound agent.

    Plans with find_path and then advances one cell per ``step()``, or at
    ``config.walk_speed`` cells per second through ``update(dt)``.

    Args:
        grid: Snapshot the agent moves on.
        position: Starting cell; must be passable.
        config: Movement speed and search policy. Defaults to NavConfig().
    """

    def __init__(
        self,
        grid: NavGrid,
        position: Coord,
        config: NavConfig | None = None,
    ) -> None:
        if grid.is_obstacle(position):
            raise InvalidEndpoint(position, f"Cannot place agent on obstacle {position}")
        self._grid = grid
        self._position = position
        self._config = config if config is not None else NavConfig()
        self._destination: Coord | None = None
        self._route: Path = []
        self._accumulator = 0.0

    # --- Properties ---

    @property
    def grid(self) -> NavGrid:
        return self._grid

    @property
    def position(self) -> Coord:
        return self._position

    @property
    def destination(self) -> Coord | None:
        return self._destination

    @property
    def remaining(self) -> tuple[Coord, ...]:
        return tuple(self._route)

    @property
    def arrived(self) -> bool:
        return not self._route

    @property
    def state(self) -> str:
        """``"walk"`` while a route remains, else ``"idle"``."""
        return WALK if self._route else IDLE

    # --- Planning ---

    def move_to(self, goal: Coord) -> bool:
        """Plan a route to goal. Returns False (and stays put) if unreachable.

        Raises InvalidEndpoint if goal is an obstacle and InvalidGrid if it
        lies outside the grid.
        """
        path = find_path(self._grid, self._position, goal, self._config.search)
        if path is None:
            logger.info("no route from %s to %s", self._position, goal)
            return False
        self._destination = goal
        self._route = path
        if not path:
            self._accumulator = 0.0
        return True

    def stop(self) -> None:
        self._route = []
        self._destination = None
        self._accumulator = 0.0

    def set_grid(self, grid: NavGrid) -> None:
        """Switch to a regenerated grid, dropping any current route."""
        if not grid.in_bounds(self._position) or grid.is_obstacle(self._position):
            raise InvalidEndpoint(
                self._position, f"Agent cell {self._position} is blocked in new grid"
            )
        self._grid = grid
        self.stop()

    # --- Movement ---

    def step(self) -> Coord | None:
        """Advance one cell. Returns the new position, or None when idle."""
        if not self._route:
            return None
        self._position = self._route.pop(0)
        if not self._route:
            self._accumulator = 0.0
        return self._position

    def update(self, dt: float) -> list[Coord]:
        """Advance by elapsed time; returns the cells entered, in order."""
        if dt < 0:
            raise ValueError(f"dt must be >= 0, got {dt}")
        if not self._route:
            return []
        self._accumulator += dt * self._config.walk_speed
        entered: list[Coord] = []
        while self._accumulator >= 1.0 and self._route:
            self._accumulator -= 1.0
            entered.append(self._route.pop(0))
        if entered:
            self._position = entered[-1]
        if not self._route:
            self._accumulator = 0.0
        return entered
