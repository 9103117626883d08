"""
Snake entity for the game engine.
"""

from collections import Counter, deque
from typing import Iterable, List

from .grid import Direction, Point


class Snake:
    """
    Represents the snake on the board.

    The ordered deque is the source of truth (head at index 0, tail at the
    end). A Counter of occupied cells is kept alongside it for O(1)
    membership tests; it counts occurrences so that a head landing on the
    cell the tail is leaving in the same move never drops the cell from
    the index.

    Attributes:
        current_direction: direction of the last committed move
        pending_direction: direction requested but not yet applied
    """

    def __init__(self, positions: Iterable[Point], direction: Direction = Direction.RIGHT):
        self._positions = deque(Point(*p) for p in positions)
        self._occupied = Counter(self._positions)
        self.current_direction = direction
        self.pending_direction = direction

    @property
    def head(self) -> Point:
        """Return the head position (first element)."""
        return self._positions[0]

    @property
    def positions(self) -> List[Point]:
        """Copy of the body, head first."""
        return list(self._positions)

    def __len__(self) -> int:
        return len(self._positions)

    def __iter__(self):
        return iter(self._positions)

    def set_desired_direction(self, desired: Direction) -> None:
        """Queue a direction change; a reversal of the current direction is ignored."""
        if not self.current_direction.is_opposite(desired):
            self.pending_direction = desired

    def flush_pending_direction(self) -> None:
        """Commit the queued direction. Called once per tick before the next head is computed."""
        self.current_direction = self.pending_direction

    def move_to(self, next_head: Point, grow: bool) -> None:
        """
        Move the snake onto an already computed head cell.

        The caller handles wrap/boundary arithmetic; `next_head` is not
        validated here.

        Args:
            next_head: the new head cell
            grow: True when the snake ate food this tick (tail is kept)
        """
        self._positions.appendleft(next_head)
        self._occupied[next_head] += 1

        if not grow:
            tail = self._positions.pop()
            self._occupied[tail] -= 1
            if not self._occupied[tail]:
                del self._occupied[tail]

    def has_head_collided_with_body(self) -> bool:
        """True if the head occupies a cell also occupied by another segment."""
        return self._occupied[self.head] > 1

    def contains_point(self, point: Point) -> bool:
        return point in self._occupied

    def __repr__(self):
        return f"<Snake head={self.head} length={len(self)} direction={self.current_direction}>"
