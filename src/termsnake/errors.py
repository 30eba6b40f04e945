# errors.py


class TermsnakeError(Exception):
    """Base class for every error raised by the game engine."""


class ConfigError(TermsnakeError, ValueError):
    """The board or tunables cannot host a game."""


class FoodPlacementError(TermsnakeError):
    """No empty cell was found within the caller's attempt budget."""


class SessionEnded(TermsnakeError):
    """A tick was requested after the session finished."""
