"""
Blocking game loop that drives an engine at the interval it reports.

This plays the host's scheduler role: it owns the timing, feeds moves
from an optional Player, and stops on GAME_OVER, `stop()` or a tick
limit. All engine calls are made from the thread running `run()`.
"""

import logging
import time
from typing import Any, Callable, Dict, Optional

from ..domain.game_state import GameState
from ..engine import GameEngine
from ..players.base import Player

logger = logging.getLogger(__name__)


class GameLoop:
    """
    Args:
        engine: the engine to drive
        player: optional autopilot asked for a move before every tick
        sleep: called with the interval in seconds between ticks
        realtime: when False the loop never sleeps (headless simulation)
    """

    def __init__(
        self,
        engine: GameEngine,
        player: Optional[Player] = None,
        sleep: Callable[[float], None] = time.sleep,
        realtime: bool = True
    ):
        self.engine = engine
        self.player = player
        self.sleep = sleep
        self.realtime = realtime
        self._stopped = False

    def stop(self) -> None:
        """Ask the loop to exit after the current iteration."""
        self._stopped = True

    def run(self, max_ticks: Optional[int] = None, new_game: bool = False) -> Dict[str, Any]:
        """
        Run one session until it ends.

        A new game is started when `new_game` is set or when none is
        RUNNING or PAUSED; otherwise the current session continues.

        Returns:
            A dictionary summarizing the session.
        """
        self._stopped = False
        if new_game or self.engine.state not in (GameState.RUNNING, GameState.PAUSED):
            self.engine.start_new_game()

        ticks = 0
        while not self._stopped and self.engine.state != GameState.GAME_OVER:
            if max_ticks is not None and ticks >= max_ticks:
                logger.info("Stopping after reaching max ticks (%d)", max_ticks)
                break

            if self.engine.state == GameState.PAUSED and not self.realtime:
                # Nothing inside a headless loop can resume the game
                logger.info("Engine is paused; stopping headless loop")
                break

            if self.player is not None and self.engine.state == GameState.RUNNING:
                move = self.player.get_move(self.engine.get_current_state())
                self.engine.set_desired_direction(move)

            interval_ms = self.engine.tick()
            ticks += 1

            if self.realtime:
                self.sleep(interval_ms / 1000.0)

        summary = self.summary()
        summary["loop_ticks"] = ticks
        return summary

    def summary(self) -> Dict[str, Any]:
        engine = self.engine
        return {
            "state": engine.state.name,
            "score": engine.score,
            "high_score": engine.high_score,
            "food_eaten": engine.food_eaten,
            "ticks": engine.tick_count,
            "length": len(engine.snake) if engine.snake is not None else 0,
            "game_over_reason": engine.game_over_reason,
            "difficulty": engine.difficulty.name,
            "wrap_mode": engine.wrap_mode,
        }
