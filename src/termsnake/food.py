# food.py
import logging
import random
from typing import Optional

from .errors import FoodPlacementError
from .grid import Cell, Coord, Grid

logger = logging.getLogger(__name__)


def place_food(grid: Grid, rng: random.Random, max_attempts: Optional[int] = None) -> Coord:
    """
    Mark a uniformly random EMPTY cell as FOOD and return it.

    The whole board is sampled, walls included; occupied samples are
    simply drawn again. On a board with no empty cell this never returns
    unless `max_attempts` is given, in which case FoodPlacementError is
    raised after that many rejected samples.
    """
    attempts = 0
    while True:
        fx = rng.randrange(grid.width)
        fy = rng.randrange(grid.height)
        if grid.get(fx, fy) == Cell.EMPTY:
            grid.set(fx, fy, Cell.FOOD)
            logger.debug("food placed at %s after %d rejected samples", (fx, fy), attempts)
            return (fx, fy)
        attempts += 1
        if max_attempts is not None and attempts >= max_attempts:
            raise FoodPlacementError(f"No empty cell found in {attempts} samples")
