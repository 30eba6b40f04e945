"""Tests for the Grid module."""

import numpy as np
import pytest

from termsnake.errors import ConfigError
from termsnake.grid import Cell, Grid


class TestGridInit:
    def test_dimensions(self):
        grid = Grid(width=20, height=10)
        assert grid.width == 20
        assert grid.height == 10
        assert grid.cells.shape == (10, 20)

    def test_all_cells_start_empty(self):
        grid = Grid(width=5, height=4)
        assert np.all(grid.cells == Cell.EMPTY)

    @pytest.mark.parametrize("width,height", [(0, 5), (5, 0), (0, 0)])
    def test_degenerate_size_rejected(self, width, height):
        with pytest.raises(ConfigError):
            Grid(width, height)

    def test_config_error_is_a_value_error(self):
        with pytest.raises(ValueError):
            Grid(0, 3)

    def test_center(self):
        assert Grid(20, 10).center == (10, 5)
        assert Grid(7, 7).center == (3, 3)


class TestGridOperations:
    def test_set_and_get_use_x_then_y(self):
        grid = Grid(width=5, height=3)
        grid.set(4, 1, Cell.FOOD)
        assert grid.get(4, 1) == Cell.FOOD
        assert grid.cells[1, 4] == Cell.FOOD

    def test_in_bounds(self):
        grid = Grid(width=5, height=3)
        assert grid.in_bounds(0, 0)
        assert grid.in_bounds(4, 2)
        assert not grid.in_bounds(-1, 0)
        assert not grid.in_bounds(5, 0)
        assert not grid.in_bounds(0, 3)

    def test_cells_of_is_row_major(self):
        grid = Grid(width=4, height=3)
        grid.set(3, 0, Cell.SNAKE)
        grid.set(0, 2, Cell.SNAKE)
        grid.set(1, 1, Cell.SNAKE)
        assert grid.cells_of(Cell.SNAKE) == [(3, 0), (1, 1), (0, 2)]


class TestWalls:
    def test_border_ring_only(self):
        grid = Grid(width=6, height=4)
        grid.place_walls()
        for x in range(6):
            assert grid.get(x, 0) == Cell.WALL
            assert grid.get(x, 3) == Cell.WALL
        for y in range(4):
            assert grid.get(0, y) == Cell.WALL
            assert grid.get(5, y) == Cell.WALL
        assert len(grid.cells_of(Cell.WALL)) == 2 * 6 + 2 * 4 - 4
        assert len(grid.cells_of(Cell.EMPTY)) == 4 * 2


class TestSyncSnake:
    def test_replaces_previous_snake_cells(self):
        grid = Grid(width=6, height=4)
        grid.sync_snake([(1, 1), (2, 1)])
        grid.sync_snake([(2, 1), (3, 1), (3, 2)])
        assert set(grid.cells_of(Cell.SNAKE)) == {(2, 1), (3, 1), (3, 2)}
        assert grid.get(1, 1) == Cell.EMPTY

    def test_leaves_walls_and_food_alone(self):
        grid = Grid(width=6, height=4)
        grid.place_walls()
        grid.set(4, 2, Cell.FOOD)
        grid.sync_snake([(1, 1), (2, 1)])
        grid.sync_snake([(2, 1), (3, 1)])
        assert grid.get(4, 2) == Cell.FOOD
        assert len(grid.cells_of(Cell.WALL)) == 16

    def test_off_board_segment_is_a_programming_error(self):
        grid = Grid(width=3, height=3)
        with pytest.raises(AssertionError):
            grid.sync_snake([(3, 1)])


class TestRender:
    def test_glyph_per_cell(self):
        grid = Grid(width=4, height=1)
        grid.set(0, 0, Cell.SNAKE)
        grid.set(1, 0, Cell.WALL)
        grid.set(2, 0, Cell.FOOD)
        assert grid.render() == "oMx "

    def test_row_major_without_newlines(self):
        grid = Grid(width=3, height=3)
        grid.place_walls()
        grid.set(1, 1, Cell.FOOD)
        assert grid.render() == "MMMMxMMMM"
        assert grid.rows() == ["MMM", "MxM", "MMM"]

    def test_length_and_stability(self):
        grid = Grid(width=20, height=10)
        grid.place_walls()
        grid.sync_snake([(8, 5), (9, 5)])
        first = grid.render()
        assert len(first) == 20 * 10
        assert "\n" not in first
        assert grid.render() == first
