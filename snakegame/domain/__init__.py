"""
Domain entities for the snake game engine.

This module contains the core game entities that are independent of
rendering, input decoding and scheduling.
"""

from .constants import COLS, ROWS, MIN_INTERVAL_MS, SPEED_SCALE_EVERY, SPEED_STEP_MS
from .difficulty import Difficulty
from .food import Food
from .game_state import GameSnapshot, GameState
from .grid import Direction, Point
from .snake import Snake

__all__ = [
    'COLS', 'ROWS', 'MIN_INTERVAL_MS', 'SPEED_SCALE_EVERY', 'SPEED_STEP_MS',
    'Difficulty',
    'Direction',
    'Food',
    'GameSnapshot',
    'GameState',
    'Point',
    'Snake',
]
