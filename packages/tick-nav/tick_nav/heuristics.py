"""Distance estimates between grid coordinates."""
from __future__ import annotations

from typing import Callable

from tick_nav.types import Coord

Heuristic = Callable[[Coord, Coord], float]


def distance_sq(a: Coord, b: Coord) -> float:
    """Squared Euclidean distance.

    Grows quadratically, so it overestimates on 4-connected grids and is
    not admissible. Kept as the default search heuristic.
    """
    dx = b[0] - a[0]
    dz = b[1] - a[1]
    return float(dx * dx + dz * dz)


def manhattan(a: Coord, b: Coord) -> float:
    """Manhattan distance. Admissible and consistent for unit 4-way steps."""
    return float(abs(b[0] - a[0]) + abs(b[1] - a[1]))


HEURISTICS: dict[str, Heuristic] = {
    "distance_sq": distance_sq,
    "manhattan": manhattan,
}


def resolve_heuristic(heuristic: str | Heuristic) -> Heuristic:
    if callable(heuristic):
        return heuristic
    try:
        return HEURISTICS[heuristic]
    except KeyError:
        raise KeyError(
            f"Unknown heuristic '{heuristic}', expected one of {sorted(HEURISTICS)}"
        ) from None
