"""
Base player interface for the game engine.
"""

from ..domain.game_state import GameSnapshot
from ..domain.grid import Direction


class Player:
    """
    Base class/interface for player logic.

    A player looks at the current snapshot and returns the direction it
    wants the snake to take next.
    """

    def get_move(self, snapshot: GameSnapshot) -> Direction:
        """
        Return a move direction given the current snapshot.

        Args:
            snapshot: Current state of the game

        Returns:
            One of Direction.UP, DOWN, LEFT, RIGHT
        """
        raise NotImplementedError
