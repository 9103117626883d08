"""
Tests for the Point and Direction value types.
"""

import pytest

from snakegame.domain import Direction, Point


class TestDirection:
    """Tests for Direction."""

    def test_unit_vectors_use_screen_orientation(self):
        """UP decreases y, DOWN increases y."""
        assert (Direction.UP.dx, Direction.UP.dy) == (0, -1)
        assert (Direction.DOWN.dx, Direction.DOWN.dy) == (0, 1)
        assert (Direction.LEFT.dx, Direction.LEFT.dy) == (-1, 0)
        assert (Direction.RIGHT.dx, Direction.RIGHT.dy) == (1, 0)

    @pytest.mark.parametrize("a, b", [
        (Direction.UP, Direction.DOWN),
        (Direction.DOWN, Direction.UP),
        (Direction.LEFT, Direction.RIGHT),
        (Direction.RIGHT, Direction.LEFT),
    ])
    def test_reversed_pairs_are_opposite(self, a, b):
        assert a.is_opposite(b)
        assert a.opposite is b

    def test_direction_is_not_its_own_opposite(self):
        for d in Direction:
            assert not d.is_opposite(d)

    def test_perpendicular_directions_are_not_opposite(self):
        assert not Direction.UP.is_opposite(Direction.LEFT)
        assert not Direction.UP.is_opposite(Direction.RIGHT)
        assert not Direction.LEFT.is_opposite(Direction.DOWN)

    def test_from_name_is_case_insensitive(self):
        assert Direction.from_name("up") is Direction.UP
        assert Direction.from_name(" Right ") is Direction.RIGHT

    def test_from_name_rejects_unknown(self):
        with pytest.raises(ValueError):
            Direction.from_name("diagonal")


class TestPoint:
    """Tests for Point."""

    def test_structural_equality(self):
        assert Point(3, 4) == Point(3, 4)
        assert Point(3, 4) == (3, 4)
        assert Point(3, 4) != Point(4, 3)
        assert len({Point(1, 1), Point(1, 1)}) == 1

    def test_moved(self):
        assert Point(5, 5).moved(Direction.UP) == Point(5, 4)
        assert Point(5, 5).moved(Direction.RIGHT) == Point(6, 5)

    def test_wrapped_uses_floor_mod(self):
        """Negative coordinates wrap to the far edge instead of staying negative."""
        assert Point(-1, 3).wrapped(40, 25) == Point(39, 3)
        assert Point(40, 3).wrapped(40, 25) == Point(0, 3)
        assert Point(7, -1).wrapped(40, 25) == Point(7, 24)
        assert Point(7, 25).wrapped(40, 25) == Point(7, 0)

    def test_in_bounds(self):
        assert Point(0, 0).in_bounds(40, 25)
        assert Point(39, 24).in_bounds(40, 25)
        assert not Point(40, 0).in_bounds(40, 25)
        assert not Point(0, -1).in_bounds(40, 25)
