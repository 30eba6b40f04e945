# autopilot.py
from __future__ import annotations

from typing import List, Optional

import numpy as np  # type: ignore

from .config import DIRECTIONS
from .grid import Cell, Coord
from .rules import Event, resolve
from .session import Session
from .snake import Direction, is_opposite


def find_food(cells: np.ndarray) -> Optional[Coord]:
    """(x, y) of the first FOOD cell, or None while none is on the board."""
    hits = np.argwhere(cells == Cell.FOOD)
    if len(hits) == 0:
        return None
    y, x = hits[0]
    return (int(x), int(y))


def preferred_moves(head: Coord, food: Coord) -> List[Direction]:
    """
    All four directions, closest-to-food first: each is ranked by the
    Manhattan distance from the cell it leads to. Ties keep DIRECTIONS
    order. Collisions are not considered here.
    """
    def distance_after(d: Direction) -> int:
        return abs(food[0] - (head[0] + d[0])) + abs(food[1] - (head[1] + d[1]))

    return sorted(DIRECTIONS, key=distance_after)


class Autopilot:
    """
    Greedy input source for a session:
    - prefer directions that reduce Manhattan distance to the food
    - skip any direction whose next cell would bump
    - never request a reversal
    - if every turn bumps, keep going straight
    """

    def __init__(self, session: Session) -> None:
        self.session = session

    def _would_bump(self, direction: Direction) -> bool:
        hx, hy = self.session.snake.head
        # The tail cell still reads as SNAKE when the head arrives, so it counts
        return resolve(self.session.grid, (hx + direction[0], hy + direction[1])) is Event.BUMP

    def choose(self) -> Direction:
        snake = self.session.snake
        food = find_food(self.session.grid.cells)
        prefs = preferred_moves(snake.head, food) if food else list(DIRECTIONS)

        for d in prefs:
            if is_opposite(d, snake.direction):
                continue
            if not self._would_bump(d):
                return d
        return snake.direction

    def poll(self) -> Direction:
        return self.choose()
