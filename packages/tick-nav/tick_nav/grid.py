"""NavGrid - immutable rectangular snapshot of cell passability."""
from __future__ import annotations

from typing import Iterable, Sequence

from tick_nav.types import Cell, Coord, InvalidGrid

# north, south, west, east
_DIRS_4 = [(0, -1), (0, 1), (-1, 0), (1, 0)]


class NavGrid:
    """Read-only grid of Cells indexed ``[row][col]``.

    Raises InvalidGrid if the grid is empty, ragged, or a cell's own
    coordinates disagree with its position.
    """

    def __init__(self, cells: Sequence[Sequence[Cell]]) -> None:
        rows = tuple(tuple(row) for row in cells)
        if not rows or not rows[0]:
            raise InvalidGrid("Grid must have at least one row and one column")
        width = len(rows[0])
        for r, row in enumerate(rows):
            if len(row) != width:
                raise InvalidGrid(
                    f"Row {r} has {len(row)} cells, expected {width}"
                )
            for c, cell in enumerate(row):
                if cell.coord != (c, r):
                    raise InvalidGrid(
                        f"Cell at [{r}][{c}] reports coordinate {cell.coord}"
                    )
        self._rows = rows
        self._width = width
        self._height = len(rows)

    # --- Constructors ---

    @classmethod
    def from_obstacles(
        cls,
        width: int,
        height: int,
        obstacles: Iterable[Coord] = (),
    ) -> NavGrid:
        blocked = set(obstacles)
        for col, row in blocked:
            if not (0 <= col < width and 0 <= row < height):
                raise InvalidGrid(
                    f"({col}, {row}) out of bounds for {width}x{height} grid"
                )
        return cls(
            [
                [Cell(col, row, (col, row) in blocked) for col in range(width)]
                for row in range(height)
            ]
        )

    @classmethod
    def from_strings(cls, rows: Sequence[str], obstacle: str = "#") -> NavGrid:
        """Build from ASCII rows, e.g. ``["..#", "..."]``.

        Any character other than ``obstacle`` is passable.
        """
        return cls(
            [
                [Cell(col, row, ch == obstacle) for col, ch in enumerate(line)]
                for row, line in enumerate(rows)
            ]
        )

    # --- Properties ---

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    # --- Queries ---

    def in_bounds(self, coord: Coord) -> bool:
        col, row = coord
        return 0 <= col < self._width and 0 <= row < self._height

    def _check_bounds(self, coord: Coord) -> None:
        if not self.in_bounds(coord):
            raise InvalidGrid(
                f"{coord} out of bounds for {self._width}x{self._height} grid"
            )

    def cell(self, coord: Coord) -> Cell:
        self._check_bounds(coord)
        col, row = coord
        return self._rows[row][col]

    def is_obstacle(self, coord: Coord) -> bool:
        return self.cell(coord).obstacle

    def passable(self, coord: Coord) -> bool:
        """False for obstacles and for coordinates outside the grid."""
        return self.in_bounds(coord) and not self.cell(coord).obstacle

    def neighbors(self, coord: Coord) -> list[Coord]:
        """In-bounds cardinal neighbours, ordered north, south, west, east."""
        col, row = coord
        result: list[Coord] = []
        for dc, dr in _DIRS_4:
            nc, nr = col + dc, row + dr
            if 0 <= nc < self._width and 0 <= nr < self._height:
                result.append((nc, nr))
        return result

    def rows(self) -> tuple[tuple[Cell, ...], ...]:
        return self._rows

    def obstacles(self) -> list[Coord]:
        return [cell.coord for row in self._rows for cell in row if cell.obstacle]

    def passable_cells(self) -> list[Coord]:
        return [cell.coord for row in self._rows for cell in row if not cell.obstacle]

    # --- Derivation ---

    def with_obstacles(self, coords: Iterable[Coord], obstacle: bool = True) -> NavGrid:
        """Return a copy with the given cells set (or cleared). Self is unchanged."""
        changed = set(coords)
        for coord in changed:
            self._check_bounds(coord)
        return NavGrid(
            [
                [
                    Cell(cell.col, cell.row, obstacle) if cell.coord in changed else cell
                    for cell in row
                ]
                for row in self._rows
            ]
        )

    def render(
        self,
        path: Iterable[Coord] = (),
        start: Coord | None = None,
        goal: Coord | None = None,
    ) -> str:
        marked = set(path)
        lines: list[str] = []
        for row in self._rows:
            chars: list[str] = []
            for cell in row:
                if cell.coord == start:
                    chars.append("S")
                elif cell.coord == goal:
                    chars.append("G")
                elif cell.coord in marked:
                    chars.append("*")
                elif cell.obstacle:
                    chars.append("#")
                else:
                    chars.append(".")
            lines.append("".join(chars))
        return "\n".join(lines)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NavGrid):
            return NotImplemented
        return self._rows == other._rows

    def __hash__(self) -> int:
        return hash(self._rows)

    def __repr__(self) -> str:
        return f"NavGrid({self._width}x{self._height}, obstacles={len(self.obstacles())})"
