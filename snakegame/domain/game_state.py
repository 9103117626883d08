"""
GameState lifecycle enum and GameSnapshot, a read-only copy of a session
at a point in time.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional, Tuple

from .constants import SPEED_SCALE_EVERY
from .difficulty import Difficulty
from .grid import Direction, Point


class GameState(Enum):
    WAITING = "waiting"      # before the first start
    RUNNING = "running"
    PAUSED = "paused"
    GAME_OVER = "game_over"  # collision occurred


@dataclass(frozen=True)
class GameSnapshot:
    """
    A snapshot of the engine handed to listeners after every change.

    Attributes:
        cols, rows: board dimensions
        state: lifecycle state
        snake: body cells, head first (empty before the first game)
        direction: direction of the last committed move
        food: food cell, or None before the first game
        score, high_score, food_eaten: session counters
        wrap_mode, difficulty: current configuration
        interval_ms: tick interval the scheduler should use next
        tick_count: committed moves this session
        game_over_reason: 'wall' or 'self' once the game is over
    """

    cols: int
    rows: int
    state: GameState
    snake: Tuple[Point, ...]
    direction: Optional[Direction]
    food: Optional[Point]
    score: int
    high_score: int
    food_eaten: int
    wrap_mode: bool
    difficulty: Difficulty
    interval_ms: int
    tick_count: int = 0
    game_over_reason: Optional[str] = None

    @property
    def head(self) -> Optional[Point]:
        return self.snake[0] if self.snake else None

    @property
    def speed_level(self) -> int:
        """1-based speed step, one per SPEED_SCALE_EVERY food eaten."""
        return self.food_eaten // SPEED_SCALE_EVERY + 1

    def print_board(self) -> str:
        """
        Returns a string representation of the board with:
        . = empty space
        * = food
        o = snake body
        @ = snake head
        Row 0 is printed first (top), x-axis labels (mod 10) at the bottom.
        """
        board = [['.' for _ in range(self.cols)] for _ in range(self.rows)]

        if self.food is not None:
            fx, fy = self.food
            board[fy][fx] = '*'

        for idx, (x, y) in enumerate(self.snake):
            board[y][x] = '@' if idx == 0 else 'o'

        result = [f"{y:2d} {' '.join(row)}" for y, row in enumerate(board)]
        result.append("   " + " ".join(str(x % 10) for x in range(self.cols)))
        return "\n".join(result)

    def status_line(self) -> str:
        line = (
            f"{self.state.name} | Score: {self.score} | Best: {self.high_score} | "
            f"Speed: {self.speed_level} | {self.difficulty.label}"
        )
        if self.wrap_mode:
            line += " | Wrap"
        if self.game_over_reason:
            line += f" | Hit {self.game_over_reason}"
        return line

    def to_dict(self) -> Dict[str, Any]:
        """JSON-friendly representation (points become [x, y] lists)."""
        return {
            "cols": self.cols,
            "rows": self.rows,
            "state": self.state.value,
            "snake": [[x, y] for x, y in self.snake],
            "direction": self.direction.name if self.direction else None,
            "food": [self.food.x, self.food.y] if self.food is not None else None,
            "score": self.score,
            "high_score": self.high_score,
            "food_eaten": self.food_eaten,
            "wrap_mode": self.wrap_mode,
            "difficulty": self.difficulty.name,
            "interval_ms": self.interval_ms,
            "speed_level": self.speed_level,
            "tick_count": self.tick_count,
            "game_over_reason": self.game_over_reason,
        }

    def __repr__(self):
        return (
            f"<GameSnapshot state={self.state.name}, tick={self.tick_count}, "
            f"head={self.head}, food={self.food}, score={self.score}>"
        )
