"""GridBuilder - random obstacle grids for agents to route over."""
from __future__ import annotations

import logging
import random as _random
from typing import Iterable

from tick_nav.config import NavConfig
from tick_nav.grid import NavGrid
from tick_nav.types import Cell, Coord, InvalidGrid

logger = logging.getLogger(__name__)


class GridBuilder:
    """Generates NavGrid snapshots with randomly placed obstacles.

    Each build returns a new snapshot; grids handed out earlier are never
    touched, so searches running on them stay valid.

    Args:
        config: Supplies grid_size and obstacle_chance. Defaults to NavConfig().
        seed: Seed for the builder's private RNG. None seeds from the OS.
    """

    def __init__(self, config: NavConfig | None = None, seed: int | None = None) -> None:
        self._config = config if config is not None else NavConfig()
        self._rng = _random.Random(seed)
        self._size = (self._config.grid_size, self._config.grid_size)

    @property
    def config(self) -> NavConfig:
        return self._config

    def build(
        self,
        width: int | None = None,
        height: int | None = None,
        keep_clear: Iterable[Coord] = (),
    ) -> NavGrid:
        w = width if width is not None else self._config.grid_size
        h = height if height is not None else self._config.grid_size
        if w < 1 or h < 1:
            raise InvalidGrid(f"Grid size must be at least 1x1, got {w}x{h}")
        clear = set(keep_clear)
        for col, row in clear:
            if not (0 <= col < w and 0 <= row < h):
                raise InvalidGrid(f"({col}, {row}) out of bounds for {w}x{h} grid")

        chance = self._config.obstacle_chance
        rows: list[list[Cell]] = []
        for row in range(h):
            cells: list[Cell] = []
            for col in range(w):
                # Draw for every cell so kept-clear cells don't shift the sequence
                blocked = self._rng.random() < chance
                cells.append(Cell(col, row, blocked and (col, row) not in clear))
            rows.append(cells)

        self._size = (w, h)
        grid = NavGrid(rows)
        logger.debug("built %dx%d grid with %d obstacles", w, h, len(grid.obstacles()))
        return grid

    def regenerate(self, keep_clear: Iterable[Coord] = ()) -> NavGrid:
        """Build a new grid with the dimensions of the last build."""
        w, h = self._size
        return self.build(w, h, keep_clear=keep_clear)

    def random_passable(self, grid: NavGrid) -> Coord:
        cells = grid.passable_cells()
        if not cells:
            raise InvalidGrid("Grid has no passable cells")
        return self._rng.choice(cells)
