"""
Test suite for NavGrid snapshots.

Tests cover:
- Construction and validation (empty, ragged, mis-indexed)
- ASCII and obstacle-list constructors
- Bounds, passability and cell lookup
- Cardinal neighbor queries
- Derived copies and immutability
- Rendering
"""

import pytest
from tick_nav import Cell, InvalidGrid, NavGrid


class TestNavGridConstruction:
    """Test NavGrid initialization and validation."""

    def test_dimensions(self):
        grid = NavGrid.from_obstacles(width=7, height=3)
        assert grid.width == 7
        assert grid.height == 3

    def test_from_cells(self):
        grid = NavGrid([[Cell(0, 0), Cell(1, 0, obstacle=True)]])
        assert grid.width == 2
        assert grid.height == 1
        assert grid.is_obstacle((1, 0))

    def test_empty_grid_rejected(self):
        with pytest.raises(InvalidGrid):
            NavGrid([])

    def test_empty_row_rejected(self):
        with pytest.raises(InvalidGrid):
            NavGrid([[]])

    def test_ragged_grid_rejected(self):
        with pytest.raises(InvalidGrid, match="Row 1"):
            NavGrid([[Cell(0, 0), Cell(1, 0)], [Cell(0, 1)]])

    def test_misindexed_cell_rejected(self):
        with pytest.raises(InvalidGrid):
            NavGrid([[Cell(0, 0), Cell(5, 5)]])

    def test_invalid_grid_is_value_error(self):
        with pytest.raises(ValueError):
            NavGrid([])

    def test_from_strings(self):
        grid = NavGrid.from_strings([
            "..#",
            "#..",
        ])
        assert grid.width == 3
        assert grid.height == 2
        assert sorted(grid.obstacles()) == [(0, 1), (2, 0)]

    def test_from_strings_custom_obstacle_char(self):
        grid = NavGrid.from_strings(["xo"], obstacle="x")
        assert grid.is_obstacle((0, 0))
        assert not grid.is_obstacle((1, 0))

    def test_from_strings_ragged_rejected(self):
        with pytest.raises(InvalidGrid):
            NavGrid.from_strings(["...", ".."])

    def test_from_obstacles_out_of_bounds(self):
        with pytest.raises(InvalidGrid):
            NavGrid.from_obstacles(3, 3, obstacles=[(3, 0)])


class TestNavGridQueries:
    """Test bounds, passability and lookup."""

    def test_in_bounds(self):
        grid = NavGrid.from_obstacles(4, 2)
        assert grid.in_bounds((0, 0))
        assert grid.in_bounds((3, 1))
        assert not grid.in_bounds((4, 0))
        assert not grid.in_bounds((0, 2))
        assert not grid.in_bounds((-1, 0))

    def test_cell_lookup_uses_col_row(self):
        grid = NavGrid.from_strings([
            "...",
            "..#",
        ])
        cell = grid.cell((2, 1))
        assert cell.col == 2
        assert cell.row == 1
        assert cell.obstacle

    def test_cell_out_of_bounds_raises(self):
        grid = NavGrid.from_obstacles(2, 2)
        with pytest.raises(InvalidGrid):
            grid.cell((2, 2))

    def test_passable(self):
        grid = NavGrid.from_strings([".#"])
        assert grid.passable((0, 0))
        assert not grid.passable((1, 0))

    def test_passable_false_out_of_bounds(self):
        grid = NavGrid.from_strings([".."])
        assert not grid.passable((5, 0))

    def test_passable_cells(self):
        grid = NavGrid.from_strings(["#.", ".#"])
        assert sorted(grid.passable_cells()) == [(0, 1), (1, 0)]

    def test_rows_indexed_row_then_col(self):
        grid = NavGrid.from_strings(["..", ".#"])
        assert grid.rows()[1][1].obstacle


class TestNavGridNeighbors:
    """Test 4-connected neighbor queries."""

    def test_interior_has_four_in_order(self):
        grid = NavGrid.from_obstacles(3, 3)
        assert grid.neighbors((1, 1)) == [(1, 0), (1, 2), (0, 1), (2, 1)]

    def test_corner_has_two(self):
        grid = NavGrid.from_obstacles(3, 3)
        assert grid.neighbors((0, 0)) == [(0, 1), (1, 0)]

    def test_no_diagonals(self):
        grid = NavGrid.from_obstacles(3, 3)
        for col, row in grid.neighbors((1, 1)):
            assert abs(col - 1) + abs(row - 1) == 1

    def test_neighbors_include_obstacles(self):
        grid = NavGrid.from_strings([".#"])
        assert grid.neighbors((0, 0)) == [(1, 0)]

    def test_single_cell_has_none(self):
        grid = NavGrid.from_obstacles(1, 1)
        assert grid.neighbors((0, 0)) == []


class TestNavGridDerivation:
    """Test derived copies and immutability."""

    def test_with_obstacles_returns_new_grid(self):
        grid = NavGrid.from_obstacles(3, 3)
        walled = grid.with_obstacles([(1, 0), (1, 1)])
        assert walled.is_obstacle((1, 1))
        assert not grid.is_obstacle((1, 1))

    def test_with_obstacles_can_clear(self):
        grid = NavGrid.from_strings(["##"])
        cleared = grid.with_obstacles([(0, 0)], obstacle=False)
        assert cleared.obstacles() == [(1, 0)]

    def test_with_obstacles_out_of_bounds(self):
        grid = NavGrid.from_obstacles(2, 2)
        with pytest.raises(InvalidGrid):
            grid.with_obstacles([(9, 9)])

    def test_equality(self):
        a = NavGrid.from_strings([".#", ".."])
        b = NavGrid.from_obstacles(2, 2, obstacles=[(1, 0)])
        assert a == b
        assert hash(a) == hash(b)

    def test_source_rows_not_shared(self):
        cells = [[Cell(0, 0), Cell(1, 0)]]
        grid = NavGrid(cells)
        cells[0][1] = Cell(1, 0, obstacle=True)
        assert not grid.is_obstacle((1, 0))


class TestNavGridRender:
    """Test ASCII rendering."""

    def test_render_plain(self):
        grid = NavGrid.from_strings([".#", ".."])
        assert grid.render() == ".#\n.."

    def test_render_path_and_endpoints(self):
        grid = NavGrid.from_strings(["...", "##."])
        picture = grid.render(path=[(1, 0), (2, 0), (2, 1)], start=(0, 0), goal=(2, 1))
        assert picture == "S**\n##G"
