"""
Tests for the player implementations.
"""

import random

import pytest

from snakegame.domain import Direction
from snakegame.players import Player, RandomPlayer

from conftest import make_snapshot


class TestPlayer:
    """Tests for the Player base class."""

    def test_get_move_not_implemented(self):
        with pytest.raises(NotImplementedError):
            Player().get_move(make_snapshot([(5, 5)]))


class TestRandomPlayer:
    """Tests for the RandomPlayer class."""

    def test_random_player_returns_valid_move(self):
        player = RandomPlayer(random.Random(0))
        move = player.get_move(make_snapshot([(5, 5)]))
        assert move in set(Direction)

    def test_never_reverses(self):
        player = RandomPlayer(random.Random(1))
        snapshot = make_snapshot([(5, 5), (4, 5)], direction=Direction.RIGHT)
        for _ in range(30):
            assert player.get_move(snapshot) is not Direction.LEFT

    def test_avoids_walls_when_possible(self):
        """In the top-left corner moving UP, only RIGHT is safe."""
        player = RandomPlayer(random.Random(2))
        snapshot = make_snapshot([(0, 0)], direction=Direction.UP)
        for _ in range(20):
            assert player.get_move(snapshot) is Direction.RIGHT

    def test_walls_are_safe_in_wrap_mode(self):
        player = RandomPlayer(random.Random(3))
        snapshot = make_snapshot([(0, 0)], direction=Direction.UP, wrap_mode=True)
        moves = {player.get_move(snapshot) for _ in range(50)}
        assert moves == {Direction.UP, Direction.LEFT, Direction.RIGHT}

    def test_avoids_own_body(self):
        player = RandomPlayer(random.Random(4))
        # Moving RIGHT with body above the head: UP is blocked
        snapshot = make_snapshot([(5, 5), (4, 5), (4, 4), (5, 4), (6, 4)], direction=Direction.RIGHT)
        for _ in range(30):
            assert player.get_move(snapshot) in {Direction.RIGHT, Direction.DOWN}

    def test_trapped_keeps_current_direction(self):
        player = RandomPlayer(random.Random(5))
        snapshot = make_snapshot([(0, 0), (1, 0), (1, 1), (0, 1), (0, 2)], cols=2, rows=3,
                                 direction=Direction.LEFT)
        assert player.get_move(snapshot) is Direction.LEFT
