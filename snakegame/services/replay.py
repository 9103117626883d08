"""
In-memory replay recording for a single engine.

Snapshots are kept for the lifetime of the recorder. `save()` writes them
to a JSON file on request (for debugging or sharing a run); nothing is
ever loaded back into an engine.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from ..domain.game_state import GameSnapshot
from ..engine import GameEventListener

logger = logging.getLogger(__name__)


class ReplayRecorder(GameEventListener):
    """Collects every snapshot the engine publishes."""

    def __init__(self):
        self.snapshots: List[GameSnapshot] = []

    def on_state_changed(self, snapshot: GameSnapshot) -> None:
        self.snapshots.append(snapshot)

    def clear(self) -> None:
        self.snapshots.clear()

    def serialize_history(self) -> List[Dict[str, Any]]:
        """
        Convert the recorded snapshots to a JSON-serializable list of dicts.
        """
        return [snapshot.to_dict() for snapshot in self.snapshots]

    def to_json(self, metadata: Optional[Dict[str, Any]] = None) -> str:
        data = {
            "metadata": metadata or {},
            "frames": self.serialize_history(),
        }
        return json.dumps(data, indent=2)

    def save(self, path: Union[str, Path], metadata: Optional[Dict[str, Any]] = None) -> Path:
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(self.to_json(metadata), encoding="utf-8")
        logger.info("Saved replay with %d frames to %s", len(self.snapshots), path)
        return path
