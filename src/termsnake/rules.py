# rules.py
import enum

from .grid import Cell, Coord, Grid


class Event(enum.Enum):
    BUMP = "bump"
    EAT = "eat"
    NOTHING = "nothing"


def classify(cell: Cell) -> Event:
    if cell in (Cell.SNAKE, Cell.WALL):
        return Event.BUMP
    if cell == Cell.FOOD:
        return Event.EAT
    return Event.NOTHING


def resolve(grid: Grid, head: Coord) -> Event:
    """
    What the new head landed on. Call this before grid.sync_snake()
    marks the head, or the snake collides with itself on every move.
    """
    x, y = head
    if not grid.in_bounds(x, y):
        return Event.BUMP
    return classify(grid.get(x, y))
