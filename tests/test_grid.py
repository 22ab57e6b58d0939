"""Tests for the Grid module."""

import numpy as np
import pytest

from snake_world.grid import CellType, Grid
from snake_world.snake import Direction


class TestGridInit:
    def test_dimensions(self):
        grid = Grid(8)
        assert grid.width == 8
        assert grid.size == 64

    def test_minimum_width_enforced(self):
        with pytest.raises(ValueError, match="at least 1"):
            Grid(0)


class TestGridIndexing:
    def test_contains(self):
        grid = Grid(5)
        assert grid.contains(0)
        assert grid.contains(24)
        assert not grid.contains(25)
        assert not grid.contains(-1)

    def test_to_coords(self):
        grid = Grid(5)
        assert grid.to_coords(0) == (0, 0)
        assert grid.to_coords(7) == (1, 2)
        assert grid.to_coords(24) == (4, 4)

    def test_to_index_wraps(self):
        grid = Grid(5)
        assert grid.to_index(1, 2) == 7
        assert grid.to_index(-1, 0) == 20
        assert grid.to_index(0, 5) == 0


class TestGridNextCell:
    def test_right_wraps_within_row(self):
        grid = Grid(5)
        assert grid.next_cell(4, Direction.RIGHT) == 0
        assert grid.next_cell(9, Direction.RIGHT) == 5

    def test_left_wraps_within_row(self):
        grid = Grid(5)
        assert grid.next_cell(0, Direction.LEFT) == 4
        assert grid.next_cell(5, Direction.LEFT) == 9
        assert grid.next_cell(7, Direction.LEFT) == 6

    def test_up_wraps_to_bottom_row(self):
        grid = Grid(5)
        assert grid.next_cell(2, Direction.UP) == 22
        assert grid.next_cell(12, Direction.UP) == 7

    def test_down_wraps_to_top_row(self):
        grid = Grid(5)
        assert grid.next_cell(22, Direction.DOWN) == 2
        assert grid.next_cell(7, Direction.DOWN) == 12

    @pytest.mark.parametrize("width", [1, 2, 3, 8])
    def test_next_cell_always_on_board(self, width):
        grid = Grid(width)
        for index in range(grid.size):
            for direction in Direction:
                assert grid.contains(grid.next_cell(index, direction))

    def test_edges_reappear_opposite(self):
        grid = Grid(6)
        for i in range(6):
            left_edge = i * 6
            right_edge = left_edge + 5
            assert grid.next_cell(right_edge, Direction.RIGHT) == left_edge
            assert grid.next_cell(left_edge, Direction.LEFT) == right_edge
            assert grid.next_cell(i, Direction.UP) == 30 + i
            assert grid.next_cell(30 + i, Direction.DOWN) == i

    def test_moves_match_direction_deltas(self):
        grid = Grid(7)
        for direction in Direction:
            dr, dc = direction.value
            assert grid.next_cell(24, direction) == grid.to_index(3 + dr, 3 + dc)


class TestGridOccupancy:
    def test_shape_and_codes(self):
        grid = Grid(4)
        cells = grid.occupancy([5, 4, 3], reward_cell=10)
        assert cells.shape == (4, 4)
        assert cells.dtype == np.int8
        assert cells[1, 1] == CellType.HEAD
        assert cells[1, 0] == CellType.SNAKE
        assert cells[0, 3] == CellType.SNAKE
        assert cells[2, 2] == CellType.REWARD
        assert np.count_nonzero(cells == CellType.EMPTY) == 12

    def test_without_reward(self):
        grid = Grid(3)
        cells = grid.occupancy([0])
        assert cells[0, 0] == CellType.HEAD
        assert np.count_nonzero(cells) == 1

    def test_to_dict(self):
        grid = Grid(3)
        d = grid.to_dict([4], reward_cell=8)
        assert d["width"] == 3
        assert d["size"] == 9
        assert d["cells"][1][1] == CellType.HEAD
        assert d["cells"][2][2] == CellType.REWARD
