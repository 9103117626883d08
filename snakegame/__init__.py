"""
Grid snake game engine.

The core (`snakegame.domain` and `snakegame.engine`) has no rendering,
input or scheduling dependencies; those live in `snakegame.services`,
`snakegame.players` and `snakegame.input_handler`.
"""

from .domain import Difficulty, Direction, GameSnapshot, GameState, Point
from .engine import GameEngine, GameEventListener, ListenerGroup

__version__ = "0.1.0"

__all__ = [
    'Difficulty',
    'Direction',
    'GameEngine',
    'GameEventListener',
    'GameSnapshot',
    'GameState',
    'ListenerGroup',
    'Point',
]
