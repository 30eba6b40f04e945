# headless.py
from typing import Tuple

from .session import PollResult, Session


class HeadlessFrontend:
    """No screen, no keyboard, no waiting. Pair it with the autopilot."""

    def __init__(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self.frames = 0

    def size(self) -> Tuple[int, int]:
        return self.width, self.height

    def poll(self) -> PollResult:
        return None

    def draw(self, session: Session) -> None:
        self.frames += 1

    def wait(self, ms: int) -> None:
        pass
