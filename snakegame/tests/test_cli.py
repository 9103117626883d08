"""
Tests for the play command line entry point.
"""

import json

import pytest

from snakegame.cli.play import main


@pytest.fixture(autouse=True)
def clean_env(tmp_path, monkeypatch):
    """Run every CLI test from an empty directory without SNAKE_* variables."""
    for name in ("SNAKE_DIFFICULTY", "SNAKE_WRAP_MODE", "SNAKE_SEED", "SNAKE_LOG_LEVEL", "SNAKE_FRAMES_DIR"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


def test_plays_and_prints_summary(capsys):
    assert main(["--seed", "3", "--max-ticks", "40"]) == 0

    out = capsys.readouterr().out
    summary = json.loads(out.split("Simulation Result Summary:")[1])
    assert len(summary["games"]) == 1
    assert summary["games"][0]["ticks"] <= 40
    assert summary["games"][0]["difficulty"] == "MEDIUM"


def test_multiple_games_and_replay(tmp_path):
    replay = tmp_path / "replay.json"

    main(["--seed", "5", "--games", "2", "--max-ticks", "25",
          "--difficulty", "hard", "--wrap", "--replay-out", str(replay)])

    data = json.loads(replay.read_text(encoding="utf-8"))
    assert data["metadata"]["games"] == 2
    assert data["metadata"]["difficulty"] == "HARD"
    assert data["metadata"]["wrap_mode"] is True
    assert len(data["metadata"]["results"]) == 2
    # each game starts with a fresh snapshot at tick 0
    assert sum(1 for frame in data["frames"] if frame["tick_count"] == 0 and frame["state"] == "running") >= 2


def test_frames_dir(tmp_path):
    frames = tmp_path / "frames"
    main(["--seed", "1", "--max-ticks", "2", "--frames-dir", str(frames)])
    assert len(list(frames.glob("frame_*.png"))) >= 1


def test_show_board(capsys):
    main(["--seed", "2", "--max-ticks", "1", "--show-board"])
    assert "@" in capsys.readouterr().out


def test_unknown_difficulty_exits():
    with pytest.raises(SystemExit):
        main(["--difficulty", "nightmare"])


def test_games_must_be_positive():
    with pytest.raises(SystemExit):
        main(["--games", "0"])


def test_invalid_env_exits(monkeypatch):
    monkeypatch.setenv("SNAKE_SEED", "not-a-number")
    with pytest.raises(SystemExit):
        main([])
