"""
Runtime settings read from the environment (and a local .env file).

Variables:
    SNAKE_DIFFICULTY   easy | medium | hard (default: medium)
    SNAKE_WRAP_MODE    true/false, 1/0, yes/no, on/off (default: false)
    SNAKE_SEED         integer seed for food placement and the autopilot
    SNAKE_LOG_LEVEL    logging level name (default: INFO)
    SNAKE_FRAMES_DIR   directory to write PNG frames to (default: unset)
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from dotenv import find_dotenv, load_dotenv

from .domain.difficulty import Difficulty

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}


def parse_bool(value: str, name: str = "value") -> bool:
    lowered = value.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ValueError(f"Invalid boolean for {name}: '{value}'")


def parse_seed(value: Optional[str]) -> Optional[int]:
    if value is None or not value.strip():
        return None
    try:
        return int(value.strip())
    except ValueError:
        raise ValueError(f"SNAKE_SEED must be an integer, got '{value}'") from None


@dataclass
class Settings:
    difficulty: Difficulty = Difficulty.MEDIUM
    wrap_mode: bool = False
    seed: Optional[int] = None
    log_level: str = "INFO"
    frames_dir: Optional[str] = None

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """
        Build settings from `environ` (defaults to os.environ after loading .env).

        Raises:
            ValueError: if a variable holds an unparseable value
        """
        if environ is None:
            load_dotenv(find_dotenv(usecwd=True))
            environ = os.environ

        frames_dir = environ.get("SNAKE_FRAMES_DIR", "").strip()
        return cls(
            difficulty=Difficulty.from_name(environ.get("SNAKE_DIFFICULTY", "MEDIUM")),
            wrap_mode=parse_bool(environ.get("SNAKE_WRAP_MODE", "false"), "SNAKE_WRAP_MODE"),
            seed=parse_seed(environ.get("SNAKE_SEED")),
            log_level=environ.get("SNAKE_LOG_LEVEL", "INFO").strip().upper() or "INFO",
            frames_dir=frames_dir or None,
        )
