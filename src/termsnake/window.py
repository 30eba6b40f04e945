# window.py
from __future__ import annotations

from typing import Optional, Tuple

import pygame  # type: ignore

from .config import (
    CELL_SIZE, BG, GREEN, RED, GREY,
    SNAKE_GLYPH, WALL_GLYPH, FOOD_GLYPH,
    UP, DOWN, LEFT, RIGHT,
)
from .session import QUIT, PollResult, Session

COLORS = {
    SNAKE_GLYPH: GREEN,
    WALL_GLYPH: GREY,
    FOOD_GLYPH: RED,
}


class WindowFrontend:
    """pygame window showing the same glyph board as the terminal, one square per cell."""

    def __init__(self, width: int, height: int, cell_size: int = CELL_SIZE) -> None:
        self.width = width
        self.height = height
        self.cell_size = cell_size

        pygame.init()
        self.screen = pygame.display.set_mode((width * cell_size, height * cell_size))
        pygame.display.set_caption("termsnake")
        self.keys = {
            pygame.K_UP: UP, pygame.K_w: UP,
            pygame.K_DOWN: DOWN, pygame.K_s: DOWN,
            pygame.K_LEFT: LEFT, pygame.K_a: LEFT,
            pygame.K_RIGHT: RIGHT, pygame.K_d: RIGHT,
        }

    def size(self) -> Tuple[int, int]:
        return self.width, self.height

    def poll(self) -> PollResult:
        """Process queued events once; the last direction key wins."""
        cand: Optional[Tuple[int, int]] = None
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return QUIT
            if event.type == pygame.KEYDOWN:
                if event.key in (pygame.K_ESCAPE, pygame.K_q):
                    return QUIT
                cand = self.keys.get(event.key, cand)
        return cand

    def draw(self, session: Session) -> None:
        self.screen.fill(BG)
        cs = self.cell_size
        for gy, row in enumerate(session.grid.rows()):
            for gx, glyph in enumerate(row):
                color = COLORS.get(glyph)
                if color is not None:
                    pygame.draw.rect(self.screen, color, pygame.Rect(gx * cs, gy * cs, cs, cs))
        pygame.display.flip()

    def wait(self, ms: int) -> None:
        pygame.time.wait(ms)

    def close(self) -> None:
        pygame.quit()
