# speed.py
from .config import START_LENGTH, START_SLEEP_TIME, MINIMUM_SLEEP_TIME, SLEEP_DECREASE_PER_FOOD


def tick_delay(
    current_length: int,
    start_length: int = START_LENGTH,
    start_sleep_ms: int = START_SLEEP_TIME,
    min_sleep_ms: int = MINIMUM_SLEEP_TIME,
    decrease_per_food: int = SLEEP_DECREASE_PER_FOOD,
) -> int:
    """Milliseconds to wait before the next tick; shrinks as the snake grows."""
    grown = current_length - start_length
    return max(min_sleep_ms, start_sleep_ms - grown * decrease_per_food)
