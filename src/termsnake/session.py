# session.py
from __future__ import annotations

import enum
import logging
import random
from dataclasses import dataclass
from typing import Callable, Optional, Union

from .config import Config
from .errors import FoodPlacementError, SessionEnded
from .food import place_food
from .grid import Cell, Coord, Grid
from .rules import Event, resolve
from .snake import Direction, Snake
from .speed import tick_delay

logger = logging.getLogger(__name__)

# Returned by an input source to end the game from outside
QUIT = "quit"

PollResult = Union[Direction, str, None]


class State(enum.Enum):
    RUNNING = "running"
    ENDED = "ended"


@dataclass
class SessionResult:
    score: int
    length: int
    ticks: int
    end_reason: str


class Session:
    """
    One game from start to bump. Owns the grid, the snake, the food RNG
    and the growth flag; nothing is shared between sessions.
    """

    def __init__(self, width: int, height: int, cfg: Optional[Config] = None) -> None:
        self.cfg = cfg or Config()
        self.cfg.validate_board(width, height)

        self.rng = random.Random(self.cfg.seed)
        self.grid = Grid(width, height)
        self.snake = Snake.create(self.grid, self.cfg.start_length)
        self.grid.place_walls()
        self.food: Optional[Coord] = self._place_food()

        self.grow = False
        self.state = State.RUNNING
        self.end_reason: Optional[str] = None
        self.score = 0
        self.ticks = 0
        logger.info(
            "session started on %dx%d board, snake %s facing %s",
            width, height, self.snake.coordinates, self.snake.direction,
        )

    # ---------- Queries ----------
    @property
    def running(self) -> bool:
        return self.state is State.RUNNING

    @property
    def delay_ms(self) -> int:
        return tick_delay(
            len(self.snake),
            start_length=self.cfg.start_length,
            start_sleep_ms=self.cfg.start_sleep_ms,
            min_sleep_ms=self.cfg.min_sleep_ms,
            decrease_per_food=self.cfg.sleep_decrease_per_food,
        )

    def render(self) -> str:
        return self.grid.render()

    def result(self) -> SessionResult:
        return SessionResult(
            score=self.score,
            length=len(self.snake),
            ticks=self.ticks,
            end_reason=self.end_reason or "",
        )

    # ---------- Transitions ----------
    def _place_food(self) -> Coord:
        return place_food(self.grid, self.rng, self.cfg.food_max_attempts)

    def _end(self, reason: str) -> None:
        self.state = State.ENDED
        self.end_reason = reason
        logger.info("session ended (%s) after %d ticks, score %d", reason, self.ticks, self.score)

    def stop(self, reason: str = QUIT) -> None:
        """End the game from outside; the board is left untouched."""
        if self.running:
            self._end(reason)

    def tick(self, requested: Optional[Direction] = None) -> Event:
        """
        Advance the simulation by one step and return what happened.

        The event is read from the board before the snake is synced onto
        it, so the new head never sees itself.
        """
        if not self.running:
            raise SessionEnded(f"Session already ended ({self.end_reason})")

        if requested is not None and not self.snake.set_pending_direction(requested):
            logger.debug("dropped reversing direction %s", requested)

        head = self.snake.advance(self.grow)
        event = resolve(self.grid, head)
        # Only a bumping head can be off the board
        on_board = [c for c in self.snake.body if self.grid.in_bounds(*c)]
        self.grid.sync_snake(on_board)
        self.ticks += 1

        if event is Event.EAT:
            self.grow = True
            self.score += 1
            self.food = None
            try:
                self.food = self._place_food()
            except FoodPlacementError as e:
                logger.warning("giving up on food placement: %s", e)
                self._end("board_full")
        elif event is Event.BUMP:
            self._end("bump")
        else:
            self.grow = False

        assert set(self.grid.cells_of(Cell.SNAKE)) == set(on_board), "grid and snake out of sync"
        return event

    def run(
        self,
        poll: Callable[[], PollResult],
        draw: Callable[["Session"], None],
        wait: Callable[[int], None],
        max_ticks: Optional[int] = None,
    ) -> SessionResult:
        """
        Drive ticks until the snake bumps, the input source returns QUIT
        or `max_ticks` is reached. Each tick: draw, poll once, tick, wait.
        """
        while self.running:
            draw(self)
            requested = poll()
            if requested == QUIT:
                self.stop(QUIT)
                break
            self.tick(requested)  # type: ignore[arg-type]
            if max_ticks is not None and self.ticks >= max_ticks:
                self.stop("tick_limit")
            if self.running:
                wait(self.delay_ms)

        draw(self)
        return self.result()
