"""
Game engine: owns one snake session and the tick transition.

The engine has no UI dependencies. An external scheduler calls `tick()`
at the interval it returns, and all calls (ticks, input, configuration)
must be serialized by the caller; there is no internal locking.
"""

import logging
import random
from typing import Optional, Sequence

from .domain.constants import COLS, ROWS, MIN_INTERVAL_MS, SPEED_SCALE_EVERY, SPEED_STEP_MS
from .domain.difficulty import Difficulty
from .domain.food import Food
from .domain.game_state import GameSnapshot, GameState
from .domain.grid import Direction, Point
from .domain.snake import Snake

logger = logging.getLogger(__name__)


class GameEventListener:
    """
    Callback interface notified after every state-affecting engine call.

    Implementations must not call back into the engine from
    `on_state_changed`.
    """

    def on_state_changed(self, snapshot: GameSnapshot) -> None:
        raise NotImplementedError


class ListenerGroup(GameEventListener):
    """Fans one notification out to several listeners, in order."""

    def __init__(self, listeners: Sequence[GameEventListener]):
        self.listeners = list(listeners)

    def on_state_changed(self, snapshot: GameSnapshot) -> None:
        for listener in self.listeners:
            listener.on_state_changed(snapshot)


class GameEngine:
    """
    Manages:
      - Board size (cols, rows)
      - Snake and food
      - Lifecycle state (WAITING / RUNNING / PAUSED / GAME_OVER)
      - Score, high score and food eaten
      - Difficulty and wrap mode
    """

    def __init__(
        self,
        cols: int = COLS,
        rows: int = ROWS,
        difficulty: Difficulty = Difficulty.MEDIUM,
        wrap_mode: bool = False,
        rng: Optional[random.Random] = None,
        listener: Optional[GameEventListener] = None
    ):
        self.cols = cols
        self.rows = rows
        self.difficulty = difficulty
        self.wrap_mode = wrap_mode
        self.rng = rng or random.Random()
        self.listener = listener

        self.snake: Optional[Snake] = None
        self.food: Optional[Food] = None
        self.state = GameState.WAITING
        self.score = 0
        self.high_score = 0
        self.food_eaten = 0
        self.tick_count = 0
        self.game_over_reason: Optional[str] = None

    def set_listener(self, listener: Optional[GameEventListener]) -> None:
        self.listener = listener

    def start_new_game(self) -> None:
        """Reset the session: length-1 snake at the centre moving RIGHT, fresh food."""
        start = Point(self.cols // 2, self.rows // 2)
        self.snake = Snake([start], Direction.RIGHT)
        self.food = Food(self.rng)
        self.score = 0
        self.food_eaten = 0
        self.tick_count = 0
        self.game_over_reason = None
        self.food.respawn(self.cols, self.rows, self.snake)
        self.state = GameState.RUNNING

        logger.info(
            "New game on %dx%d board (difficulty=%s, wrap=%s), food at %s",
            self.cols, self.rows, self.difficulty.name, self.wrap_mode, self.food.position,
        )
        self._notify_listener()

    def tick(self) -> int:
        """
        Advance the game one step.

        Returns:
            The delay in milliseconds before the next tick.
        """
        if self.state != GameState.RUNNING:
            return self.current_interval()

        # The direction used for this move must be the one observers see
        self.snake.flush_pending_direction()
        direction = self.snake.current_direction

        next_head = self.snake.head.moved(direction)

        if self.wrap_mode:
            next_head = next_head.wrapped(self.cols, self.rows)
        elif not next_head.in_bounds(self.cols, self.rows):
            self._end_game("wall")
            return self.current_interval()

        ate = next_head == self.food.position

        self.snake.move_to(next_head, grow=ate)
        self.tick_count += 1

        if self.snake.has_head_collided_with_body():
            self._end_game("self")
            return self.current_interval()

        if ate:
            self.score += self.difficulty.score_gain
            self.food_eaten += 1
            if self.score > self.high_score:
                self.high_score = self.score
            self.food.respawn(self.cols, self.rows, self.snake)
            logger.debug(
                "Food eaten at %s (score=%d, length=%d), new food at %s",
                next_head, self.score, len(self.snake), self.food.position,
            )

        logger.debug("Tick %d: head=%s direction=%s", self.tick_count, next_head, direction.name)
        self._notify_listener()
        return self.current_interval()

    def toggle_pause(self) -> None:
        if self.state == GameState.RUNNING:
            self.state = GameState.PAUSED
        elif self.state == GameState.PAUSED:
            self.state = GameState.RUNNING
        self._notify_listener()

    def set_desired_direction(self, direction: Direction) -> None:
        # Ignored while paused so a queued move can't fire on resume
        if self.snake is not None and self.state == GameState.RUNNING:
            self.snake.set_desired_direction(direction)

    def set_difficulty(self, difficulty: Difficulty) -> None:
        self.difficulty = difficulty
        self._notify_listener()

    def set_wrap_mode(self, wrap_mode: bool) -> None:
        self.wrap_mode = bool(wrap_mode)
        self._notify_listener()

    def current_interval(self) -> int:
        """Base interval for the difficulty, 10ms faster per 5 food, never below 40ms."""
        steps = self.food_eaten // SPEED_SCALE_EVERY
        interval = self.difficulty.base_interval_ms - steps * SPEED_STEP_MS
        return max(interval, MIN_INTERVAL_MS)

    def get_current_state(self) -> GameSnapshot:
        """
        Return a snapshot of the current session as a GameSnapshot.
        """
        return GameSnapshot(
            cols=self.cols,
            rows=self.rows,
            state=self.state,
            snake=tuple(self.snake) if self.snake is not None else (),
            direction=self.snake.current_direction if self.snake is not None else None,
            food=self.food.position if self.food is not None else None,
            score=self.score,
            high_score=self.high_score,
            food_eaten=self.food_eaten,
            wrap_mode=self.wrap_mode,
            difficulty=self.difficulty,
            interval_ms=self.current_interval(),
            tick_count=self.tick_count,
            game_over_reason=self.game_over_reason,
        )

    def _end_game(self, reason: str) -> None:
        self.state = GameState.GAME_OVER
        self.game_over_reason = reason
        logger.info(
            "Game Over: hit %s after %d ticks (score=%d, high score=%d)",
            reason, self.tick_count, self.score, self.high_score,
        )
        self._notify_listener()

    def _notify_listener(self) -> None:
        if self.listener is not None:
            self.listener.on_state_changed(self.get_current_state())
