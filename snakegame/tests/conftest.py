"""
Shared fixtures for the snake engine tests.
"""

import random
from unittest.mock import Mock

import pytest

from snakegame.domain import Difficulty, Direction, GameSnapshot, GameState, Point
from snakegame.engine import GameEngine


@pytest.fixture
def engine():
    """A 40x25 MEDIUM engine with a seeded random source."""
    return GameEngine(rng=random.Random(1234))


@pytest.fixture
def listener():
    return Mock()


def feed(engine: GameEngine) -> int:
    """Put the food right in front of the head and tick once."""
    engine.food.position = engine.snake.head.moved(engine.snake.pending_direction)
    return engine.tick()


def starve(engine: GameEngine, food=Point(0, 0)) -> int:
    """Park the food out of the way and tick once."""
    engine.food.position = food
    return engine.tick()


def make_snapshot(snake, direction=Direction.RIGHT, cols=10, rows=10, food=None,
                  wrap_mode=False, state=GameState.RUNNING, **overrides) -> GameSnapshot:
    fields = dict(
        cols=cols,
        rows=rows,
        state=state,
        snake=tuple(Point(*p) for p in snake),
        direction=direction,
        food=Point(*food) if food is not None else None,
        score=0,
        high_score=0,
        food_eaten=0,
        wrap_mode=wrap_mode,
        difficulty=Difficulty.MEDIUM,
        interval_ms=Difficulty.MEDIUM.base_interval_ms,
    )
    fields.update(overrides)
    return GameSnapshot(**fields)
