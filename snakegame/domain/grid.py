"""
Grid value types: Point and Direction.

Coordinates follow screen orientation: x grows to the right, y grows
downward, so row 0 is the top row of the board.
"""

from enum import Enum
from typing import NamedTuple


class Direction(Enum):
    """A movement direction carrying its (dx, dy) unit vector."""

    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]

    @property
    def opposite(self) -> "Direction":
        return _OPPOSITES[self]

    def is_opposite(self, other: "Direction") -> bool:
        """True only for the 180 degree reversed pair (UP/DOWN, LEFT/RIGHT)."""
        return _OPPOSITES[self] is other

    @classmethod
    def from_name(cls, name: str) -> "Direction":
        """
        Parse a direction name such as "up" or " RIGHT ".

        Raises:
            ValueError: if the name is not one of UP, DOWN, LEFT, RIGHT
        """
        try:
            return cls[name.strip().upper()]
        except KeyError:
            valid = ", ".join(d.name for d in cls)
            raise ValueError(f"Unknown direction '{name}'. Expected one of: {valid}") from None

    def __str__(self) -> str:
        return self.name


_OPPOSITES = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


class Point(NamedTuple):
    """An integer grid cell. Compares equal to a plain (x, y) tuple."""

    x: int
    y: int

    def moved(self, direction: Direction) -> "Point":
        """Return the neighbouring cell one step in `direction`."""
        return Point(self.x + direction.dx, self.y + direction.dy)

    def wrapped(self, cols: int, rows: int) -> "Point":
        # Python's % is a floor-mod, so -1 wraps to cols - 1
        return Point(self.x % cols, self.y % rows)

    def in_bounds(self, cols: int, rows: int) -> bool:
        return 0 <= self.x < cols and 0 <= self.y < rows
