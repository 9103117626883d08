"""
Tests for food placement.
"""

import logging
import random
from unittest.mock import Mock

from snakegame.domain import Food, Point, Snake


class TestFoodRespawn:
    """Tests for Food.respawn."""

    def test_position_is_none_before_first_respawn(self):
        assert Food(random.Random(0)).position is None

    def test_respawn_stays_on_board_and_off_snake(self):
        snake = Snake([(x, 0) for x in range(10)])
        food = Food(random.Random(42))
        for _ in range(200):
            pos = food.respawn(10, 3, snake)
            assert pos == food.position
            assert pos.in_bounds(10, 3)
            assert not snake.contains_point(pos)

    def test_same_seed_same_positions(self):
        snake = Snake([(5, 5)])
        a = Food(random.Random(7))
        b = Food(random.Random(7))
        assert [a.respawn(20, 20, snake) for _ in range(10)] == \
            [b.respawn(20, 20, snake) for _ in range(10)]

    def test_resamples_until_free_cell(self):
        """On a 2x1 board with one cell taken, hits on the snake are retried."""
        snake = Snake([(1, 0)])
        rng = Mock()
        rng.randrange.side_effect = [1, 0, 1, 0, 0, 0]

        food = Food(rng)

        assert food.respawn(2, 1, snake) == Point(0, 0)
        assert rng.randrange.call_count == 6

    def test_full_board_gives_up_after_bounded_attempts(self, caplog):
        """
        With no free cell left, sampling stops after 2 * cols * rows tries
        and the last candidate is kept even though it sits on the snake.
        """
        snake = Snake([(0, 0), (1, 0), (1, 1), (0, 1)])
        rng = Mock()
        rng.randrange.return_value = 1

        food = Food(rng)
        with caplog.at_level(logging.WARNING, logger="snakegame.domain.food"):
            pos = food.respawn(2, 2, snake)

        # two randrange calls (x and y) per attempt
        assert rng.randrange.call_count == 2 * (2 * 2 * 2)
        assert pos == Point(1, 1)
        assert snake.contains_point(pos)
        assert "gave up" in caplog.text
