"""
Text renderer: prints the board to a stream after every engine change.
"""

import sys
from typing import Optional, TextIO

from ..domain.game_state import GameSnapshot
from ..engine import GameEventListener


class ConsoleRenderer(GameEventListener):
    """Writes a status line followed by the board (see GameSnapshot.print_board)."""

    def __init__(self, stream: Optional[TextIO] = None, show_board: bool = True):
        self.stream = stream or sys.stdout
        self.show_board = show_board

    def on_state_changed(self, snapshot: GameSnapshot) -> None:
        self.stream.write(snapshot.status_line() + "\n")
        if self.show_board:
            self.stream.write(snapshot.print_board() + "\n\n")
        self.stream.flush()
