"""
Translates key names into engine commands.

Key decoding is left to the host (terminal, GUI toolkit, test); this
module only maps already-decoded names such as "UP", "w" or "ESCAPE".
"""

import logging
from typing import Callable, Dict, Optional

from .domain.game_state import GameState
from .domain.grid import Direction
from .engine import GameEngine

logger = logging.getLogger(__name__)

# Arrow keys and WASD
DIRECTION_KEYS: Dict[str, Direction] = {
    "UP": Direction.UP,
    "W": Direction.UP,
    "DOWN": Direction.DOWN,
    "S": Direction.DOWN,
    "LEFT": Direction.LEFT,
    "A": Direction.LEFT,
    "RIGHT": Direction.RIGHT,
    "D": Direction.RIGHT,
}
PAUSE_KEYS = {"P", "ESCAPE"}
RESTART_KEY = "R"
START_KEY = "ENTER"


class InputHandler:
    """
    Routes key presses to the engine.

    `on_restart` and `on_pause` let the host wrap those actions (for
    example to restart its scheduler); they default to the engine's own
    start_new_game and toggle_pause.
    """

    def __init__(
        self,
        engine: GameEngine,
        on_restart: Optional[Callable[[], None]] = None,
        on_pause: Optional[Callable[[], None]] = None
    ):
        self.engine = engine
        self.on_restart = on_restart or engine.start_new_game
        self.on_pause = on_pause or engine.toggle_pause

    def key_pressed(self, key: str) -> bool:
        """
        Handle one key press.

        Returns:
            True if the key is bound to an action, False otherwise.
        """
        name = key.strip().upper()

        if name in DIRECTION_KEYS:
            self.engine.set_desired_direction(DIRECTION_KEYS[name])
        elif name in PAUSE_KEYS:
            self.on_pause()
        elif name == RESTART_KEY:
            self.on_restart()
        elif name == START_KEY:
            if self.engine.state != GameState.RUNNING:
                self.on_restart()
        else:
            logger.debug("Ignoring unbound key %r", key)
            return False
        return True
