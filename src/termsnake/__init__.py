"""Terminal Snake: grid, snake, food, collision rules and the tick loop."""

from .config import Config
from .errors import ConfigError, FoodPlacementError, SessionEnded, TermsnakeError
from .grid import Cell, Grid
from .rules import Event
from .session import QUIT, Session, SessionResult, State
from .snake import Snake
from .speed import tick_delay

__all__ = [
    "Cell", "Config", "ConfigError", "Event", "FoodPlacementError", "Grid",
    "QUIT", "Session", "SessionEnded", "SessionResult", "Snake", "State",
    "TermsnakeError", "tick_delay",
]
