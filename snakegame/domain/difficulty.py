"""
Difficulty levels: starting tick interval and points per food.
"""

from enum import Enum


class Difficulty(Enum):
    EASY = ("Easy", 200, 10)
    MEDIUM = ("Medium", 130, 20)
    HARD = ("Hard", 75, 30)

    def __init__(self, label: str, base_interval_ms: int, score_gain: int):
        self.label = label
        self.base_interval_ms = base_interval_ms
        self.score_gain = score_gain

    @classmethod
    def from_name(cls, name: str) -> "Difficulty":
        """
        Parse a difficulty name case-insensitively.

        Raises:
            ValueError: for anything other than easy, medium or hard
        """
        key = name.strip().upper()
        if key in cls.__members__:
            return cls[key]
        valid = ", ".join(d.name for d in cls)
        raise ValueError(f"Unknown difficulty '{name}'. Expected one of: {valid}")

    def __str__(self) -> str:
        return self.label
