# snake.py
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

from .config import START_LENGTH, RIGHT
from .grid import Coord, Grid

Direction = Tuple[int, int]


def is_opposite(a: Direction, b: Direction) -> bool:
    """True when `a` and `b` cancel out, i.e. one turns straight back into the other."""
    return (a[0] + b[0], a[1] + b[1]) == (0, 0)


@dataclass
class Snake:
    body: List[Coord]      # tail at index 0, head last
    direction: Direction

    @classmethod
    def create(cls, grid: Grid, start_length: int = START_LENGTH) -> "Snake":
        """Horizontal snake centred on the grid, facing right, synced onto it."""
        cx, cy = grid.center
        first = cx - start_length // 2
        snake = cls(body=[(first + i, cy) for i in range(start_length)], direction=RIGHT)
        grid.sync_snake(snake.body)
        return snake

    @property
    def head(self) -> Coord:
        return self.body[-1]

    @property
    def tail(self) -> Coord:
        return self.body[0]

    @property
    def coordinates(self) -> Tuple[Coord, ...]:
        return tuple(self.body)

    def __len__(self) -> int:
        return len(self.body)

    def set_pending_direction(self, requested: Direction) -> bool:
        """Turn unless `requested` would reverse into the neck. Returns True if applied."""
        if is_opposite(requested, self.direction):
            return False
        self.direction = requested
        return True

    def next_head(self) -> Coord:
        hx, hy = self.head
        dx, dy = self.direction
        return (hx + dx, hy + dy)

    def advance(self, grow: bool) -> Coord:
        """
        Move one cell in the facing direction. The tail is kept when
        `grow` is set. Bounds are not checked here.
        """
        new_head = self.next_head()
        if not grow:
            self.body.pop(0)
        self.body.append(new_head)
        return new_head
