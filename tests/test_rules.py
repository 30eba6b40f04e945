import pytest

from termsnake.grid import Cell, Grid
from termsnake.rules import Event, classify, resolve
from termsnake.snake import Snake


@pytest.mark.parametrize("cell,event", [
    (Cell.SNAKE, Event.BUMP),
    (Cell.WALL, Event.BUMP),
    (Cell.FOOD, Event.EAT),
    (Cell.EMPTY, Event.NOTHING),
])
def test_classify(cell, event):
    assert classify(cell) is event


def test_resolve_reads_grid_cell():
    grid = Grid(5, 5)
    grid.set(2, 3, Cell.FOOD)
    assert resolve(grid, (2, 3)) is Event.EAT
    assert resolve(grid, (3, 3)) is Event.NOTHING


def test_off_board_head_bumps():
    grid = Grid(5, 5)
    assert resolve(grid, (5, 2)) is Event.BUMP
    assert resolve(grid, (-1, 2)) is Event.BUMP


def test_resolve_before_sync_sees_the_old_cell():
    grid = Grid(20, 10)
    grid.place_walls()
    snake = Snake.create(grid)
    head = snake.advance(grow=False)

    assert resolve(grid, head) is Event.NOTHING
    grid.sync_snake(snake.body)
    # Reading after the sync finds the head itself
    assert resolve(grid, head) is Event.BUMP
