"""Navigation configuration dataclasses."""
from __future__ import annotations

from dataclasses import dataclass, field

from tick_nav.pathfind import SearchConfig


@dataclass(frozen=True)
class NavConfig:
    """Immutable configuration for grid generation and agent movement.

    Attributes:
        grid_size: Default width and height of generated grids.
        obstacle_chance: Probability (0.0--1.0) that a generated cell is an obstacle.
        walk_speed: Agent movement rate in cells per second.
        search: Policy passed to find_path when planning routes.
    """

    grid_size: int = 10
    obstacle_chance: float = 0.2
    walk_speed: float = 2.0
    search: SearchConfig = field(default_factory=SearchConfig)

    def __post_init__(self) -> None:
        if self.grid_size < 1:
            raise ValueError(f"grid_size must be >= 1, got {self.grid_size}")
        if not 0.0 <= self.obstacle_chance <= 1.0:
            raise ValueError(
                f"obstacle_chance must be in [0, 1], got {self.obstacle_chance}"
            )
        if self.walk_speed <= 0:
            raise ValueError(f"walk_speed must be > 0, got {self.walk_speed}")


__all__ = ["NavConfig", "SearchConfig"]
