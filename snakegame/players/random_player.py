"""
Random player implementation - picks random safe moves.
"""

import random
from typing import List, Optional

from ..domain.game_state import GameSnapshot
from ..domain.grid import Direction
from .base import Player


class RandomPlayer(Player):
    """
    A random AI that picks a direction avoiding walls, its own body and
    reversal. In wrap mode walls are not a danger.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()

    def get_move(self, snapshot: GameSnapshot) -> Direction:
        current = snapshot.direction or Direction.RIGHT
        if not snapshot.snake:
            return current

        head = snapshot.snake[0]
        # The tail moves away this tick unless food is eaten, so it is safe
        body = set(snapshot.snake[:-1])

        valid_moves: List[Direction] = []
        for move in Direction:
            if move.is_opposite(current):
                continue

            target = head.moved(move)
            if snapshot.wrap_mode:
                target = target.wrapped(snapshot.cols, snapshot.rows)
            elif not target.in_bounds(snapshot.cols, snapshot.rows):
                continue

            if target in body:
                continue

            valid_moves.append(move)

        # If no valid moves, keep going (we'll die anyway)
        if not valid_moves:
            return current

        return self.rng.choice(valid_moves)
