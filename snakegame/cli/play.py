#!/usr/bin/env python3
"""Play snake sessions from the command line with the random autopilot.

Examples:
    python -m snakegame.cli.play --difficulty hard --wrap --seed 7
    python -m snakegame.cli.play --games 5 --max-ticks 2000
    python -m snakegame.cli.play --realtime --show-board
    python -m snakegame.cli.play --frames-dir frames/ --replay-out replay.json

Defaults for difficulty, wrap mode, seed, log level and frames directory
come from SNAKE_* environment variables (see snakegame.config).
"""

import argparse
import json
import logging
import random
import sys
from typing import List, Optional

from ..config import Settings
from ..domain.difficulty import Difficulty
from ..engine import GameEngine, GameEventListener, ListenerGroup
from ..players.random_player import RandomPlayer
from ..services.console_renderer import ConsoleRenderer
from ..services.frame_renderer import FrameRecorder
from ..services.game_loop import GameLoop
from ..services.replay import ReplayRecorder

logger = logging.getLogger(__name__)


def _difficulty_arg(value: str) -> Difficulty:
    try:
        return Difficulty.from_name(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from None


def build_parser(settings: Settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Run snake sessions driven by a random autopilot.",
    )
    parser.add_argument("--difficulty", type=_difficulty_arg, default=settings.difficulty,
                        help="easy, medium or hard (default: %(default)s)")
    parser.add_argument("--wrap", action=argparse.BooleanOptionalAction, default=settings.wrap_mode,
                        help="Wrap around board edges instead of ending the game")
    parser.add_argument("--seed", type=int, default=settings.seed,
                        help="Seed for food placement and the autopilot")
    parser.add_argument("--games", type=int, default=1,
                        help="Number of consecutive sessions to play (default: 1)")
    parser.add_argument("--max-ticks", type=int, default=None,
                        help="Stop a session after this many ticks")
    parser.add_argument("--realtime", action="store_true",
                        help="Sleep for the engine's reported interval between ticks")
    parser.add_argument("--show-board", action="store_true",
                        help="Print the board after every change")
    parser.add_argument("--frames-dir", type=str, default=settings.frames_dir,
                        help="Write a PNG frame per change into this directory")
    parser.add_argument("--replay-out", type=str, default=None,
                        help="Write the recorded snapshots of all sessions to this JSON file")
    parser.add_argument("--log-level", type=str, default=settings.log_level,
                        help="Logging level (default: %(default)s)")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    try:
        settings = Settings.from_env()
    except ValueError as exc:
        raise SystemExit(f"Invalid configuration: {exc}")

    args = build_parser(settings).parse_args(argv)

    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s [%(levelname)s] %(message)s",
    )

    if args.games < 1:
        raise SystemExit("--games must be at least 1")

    rng = random.Random(args.seed)
    engine = GameEngine(difficulty=args.difficulty, wrap_mode=args.wrap, rng=rng)

    listeners: List[GameEventListener] = []
    recorder = None
    if args.replay_out:
        recorder = ReplayRecorder()
        listeners.append(recorder)
    if args.show_board:
        listeners.append(ConsoleRenderer(sys.stdout))
    if args.frames_dir:
        listeners.append(FrameRecorder(args.frames_dir))
    if listeners:
        engine.set_listener(ListenerGroup(listeners))

    loop = GameLoop(engine, player=RandomPlayer(rng), realtime=args.realtime)

    results = []
    for game_number in range(1, args.games + 1):
        result = loop.run(max_ticks=args.max_ticks, new_game=True)
        results.append(result)
        logger.info(
            "Game %d/%d: score=%d food=%d ticks=%d reason=%s",
            game_number, args.games, result["score"], result["food_eaten"],
            result["ticks"], result["game_over_reason"],
        )

    if recorder is not None:
        recorder.save(args.replay_out, metadata={
            "games": args.games,
            "seed": args.seed,
            "difficulty": args.difficulty.name,
            "wrap_mode": args.wrap,
            "results": results,
        })

    print("\nSimulation Result Summary:")
    print(json.dumps({"games": results, "high_score": engine.high_score}, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
