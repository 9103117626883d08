"""
Food entity: a single cell the snake is trying to reach.
"""

import logging
import random
from typing import Optional

from .constants import FOOD_RETRY_FACTOR
from .grid import Point
from .snake import Snake

logger = logging.getLogger(__name__)


class Food:
    """
    Holds the food position and relocates it away from the snake.

    Randomness comes from the injected `rng` so tests can seed it.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()
        self.position: Optional[Point] = None

    def respawn(self, cols: int, rows: int, snake: Snake) -> Point:
        """
        Place the food on a random cell not occupied by the snake.

        Sampling stops after FOOD_RETRY_FACTOR * cols * rows attempts so a
        nearly full board cannot loop forever. In that case the last
        candidate is kept even though it lies on the snake.
        """
        max_attempts = FOOD_RETRY_FACTOR * cols * rows
        attempts = 0
        while True:
            candidate = Point(self.rng.randrange(cols), self.rng.randrange(rows))
            attempts += 1
            if not snake.contains_point(candidate):
                break
            if attempts >= max_attempts:
                logger.warning(
                    "Food placement gave up after %d attempts; placing on snake at %s",
                    attempts, candidate,
                )
                break

        self.position = candidate
        return candidate

    def __repr__(self):
        return f"<Food position={self.position}>"
