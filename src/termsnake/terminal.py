# terminal.py
"""curses front-end: board size from the terminal, glyphs written at (0, 0)."""

from __future__ import annotations

import curses
import logging
from typing import Optional, Tuple

from .config import UP, DOWN, LEFT, RIGHT
from .session import QUIT, PollResult, Session

logger = logging.getLogger(__name__)

KEYS = {
    curses.KEY_UP: UP, ord("w"): UP, ord("W"): UP,
    curses.KEY_DOWN: DOWN, ord("s"): DOWN, ord("S"): DOWN,
    curses.KEY_LEFT: LEFT, ord("a"): LEFT, ord("A"): LEFT,
    curses.KEY_RIGHT: RIGHT, ord("d"): RIGHT, ord("D"): RIGHT,
}
QUIT_KEYS = {ord("q"), ord("Q"), 27}  # 27 = Esc


class TerminalFrontend:
    def __init__(self, stdscr) -> None:
        self.stdscr = stdscr
        self.stdscr.nodelay(True)  # don't block on key events
        self.stdscr.keypad(True)
        try:
            curses.curs_set(0)
        except curses.error:
            logger.debug("terminal cannot hide the cursor")

    def size(self) -> Tuple[int, int]:
        height, width = self.stdscr.getmaxyx()
        return width, height

    def poll(self) -> PollResult:
        """Drain pending keys; the last arrow/WASD key wins, q or Esc quits."""
        direction: Optional[Tuple[int, int]] = None
        while True:
            key = self.stdscr.getch()
            if key == -1:
                return direction
            if key in QUIT_KEYS:
                return QUIT
            direction = KEYS.get(key, direction)

    def draw(self, session: Session) -> None:
        try:
            self.stdscr.move(0, 0)
        except curses.error:
            self.stdscr.clear()

        text = session.render()
        width, height = session.grid.width, session.grid.height
        # Writing the bottom-right cell with addstr scrolls, so insert it instead
        self.stdscr.addstr(0, 0, text[:-1])
        self.stdscr.insstr(height - 1, width - 1, text[-1])
        self.stdscr.refresh()

    def wait(self, ms: int) -> None:
        curses.napms(ms)
