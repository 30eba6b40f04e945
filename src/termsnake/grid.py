# grid.py
"""NumPy-backed board: one integer cell state per (x, y) coordinate."""

from __future__ import annotations

import enum
from typing import Iterable, List, Tuple

import numpy as np  # type: ignore

from .config import EMPTY_GLYPH, SNAKE_GLYPH, WALL_GLYPH, FOOD_GLYPH
from .errors import ConfigError

Coord = Tuple[int, int]


class Cell(enum.IntEnum):
    """Integer codes stored in the grid array."""

    EMPTY = 0
    SNAKE = 1
    WALL = 2
    FOOD = 3


# Indexed by Cell value
_GLYPHS = np.array([EMPTY_GLYPH, SNAKE_GLYPH, WALL_GLYPH, FOOD_GLYPH])


class Grid:
    """
    Fixed-size board of Cell states.

    Coordinates are (x, y) with x the column and y the row; the backing
    array is indexed [y, x] so that rows come out in render order.
    """

    def __init__(self, width: int, height: int) -> None:
        if width < 1 or height < 1:
            raise ConfigError(f"Grid must be at least 1x1, got {width}x{height}")
        self.width = width
        self.height = height
        self.cells = np.full((height, width), Cell.EMPTY, dtype=np.int8)

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    @property
    def center(self) -> Coord:
        return (self.width // 2, self.height // 2)

    def get(self, x: int, y: int) -> Cell:
        return Cell(self.cells[y, x])

    def set(self, x: int, y: int, cell: Cell) -> None:
        self.cells[y, x] = cell

    def cells_of(self, cell: Cell) -> List[Coord]:
        """Every (x, y) currently holding `cell`, in row-major order."""
        ys, xs = np.nonzero(self.cells == cell)
        return list(zip(xs.tolist(), ys.tolist()))

    def place_walls(self) -> None:
        """Turn the outermost ring of cells into walls."""
        self.cells[0, :] = Cell.WALL
        self.cells[-1, :] = Cell.WALL
        self.cells[:, 0] = Cell.WALL
        self.cells[:, -1] = Cell.WALL

    def sync_snake(self, coordinates: Iterable[Coord]) -> None:
        """
        Make the SNAKE cells match `coordinates` exactly: every old SNAKE
        cell is cleared first, then each coordinate is marked.
        """
        self.cells[self.cells == Cell.SNAKE] = Cell.EMPTY
        for x, y in coordinates:
            assert self.in_bounds(x, y), f"snake segment {(x, y)} is off the board"
            self.cells[y, x] = Cell.SNAKE

    def render(self) -> str:
        """Row-major glyphs, one per cell, without line breaks."""
        return "".join(_GLYPHS[self.cells].ravel().tolist())

    def rows(self) -> List[str]:
        return ["".join(row) for row in _GLYPHS[self.cells].tolist()]
