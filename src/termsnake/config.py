# config.py
from dataclasses import dataclass
from typing import Optional

from .errors import ConfigError

# ----- Glyphs (one character per cell) -----
EMPTY_GLYPH = " "
SNAKE_GLYPH = "o"
WALL_GLYPH = "M"
FOOD_GLYPH = "x"

# ----- Window front-end -----
CELL_SIZE = 16
BG    = (20, 20, 24)
GREEN = (80, 200, 80)
RED   = (200, 70, 70)
GREY  = (120, 120, 130)

# ----- Directions (dx, dy) -----
UP, DOWN, LEFT, RIGHT = (0, -1), (0, 1), (-1, 0), (1, 0)
DIRECTIONS = (UP, DOWN, LEFT, RIGHT)

# ----- Speed ramp (milliseconds) -----
START_LENGTH = 5
START_SLEEP_TIME = 150
MINIMUM_SLEEP_TIME = 50
SLEEP_DECREASE_PER_FOOD = 3

# ----- Tunables -----
@dataclass
class Config:
    seed: Optional[int] = None
    start_length: int = START_LENGTH
    start_sleep_ms: int = START_SLEEP_TIME
    min_sleep_ms: int = MINIMUM_SLEEP_TIME
    sleep_decrease_per_food: int = SLEEP_DECREASE_PER_FOOD
    food_max_attempts: Optional[int] = None  # None = keep sampling forever

    def start_column(self, width: int) -> int:
        """Column of the tail segment when the snake is centred on the board."""
        return width // 2 - self.start_length // 2

    def validate_board(self, width: int, height: int) -> None:
        """
        Fail fast if a (width, height) board cannot hold the wall ring,
        the starting snake and one free cell in front of its head.
        """
        if self.start_length < 1:
            raise ConfigError(f"start_length must be at least 1, got {self.start_length}")
        if width < 1 or height < 1:
            raise ConfigError(f"Board must be at least 1x1, got {width}x{height}")
        if height < 3:
            raise ConfigError(f"Board height {height} leaves no room inside the walls")

        first = self.start_column(width)
        head = first + self.start_length - 1
        if first < 1 or head + 1 > width - 2:
            raise ConfigError(
                f"Board {width}x{height} is too small for a snake of length "
                f"{self.start_length} inside the walls"
            )
        if self.food_max_attempts is not None and self.food_max_attempts < 1:
            raise ConfigError("food_max_attempts must be positive when set")
