from __future__ import annotations

from pathlib import Path

import pytest

from mapty.cli.main import build_parser, main
from mapty.workout.storage import LocalStorage
from mapty.workout.store import WorkoutStore


@pytest.fixture(autouse=True)
def _no_logging_setup(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr("mapty.cli.main.configure_logging", lambda *_args: None)


def test_parser_defaults() -> None:
    args = build_parser().parse_args([])

    assert args.web_port == 8088
    assert args.zoom == 13
    assert args.storage_dir is None
    assert args.log_level == "INFO"


def test_parser_normalizes_log_level() -> None:
    args = build_parser().parse_args(["--log-level", "debug"])
    assert args.log_level == "DEBUG"


def test_list_and_reset(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    store = WorkoutStore(LocalStorage(tmp_path))
    store.add_workout(
        "running",
        (51.5, -0.12),
        {"distance_km": "5.2", "duration_min": "24", "cadence_spm": "178"},
    )

    assert main(["--list", "--storage-dir", str(tmp_path)]) == 0
    out = capsys.readouterr().out
    assert "Running on" in out
    assert "4.62 min/km" in out

    assert main(["--reset", "--storage-dir", str(tmp_path)]) == 0
    assert main(["--list", "--storage-dir", str(tmp_path)]) == 0
    assert "No workouts recorded" in capsys.readouterr().out


def test_no_action_prints_help(capsys: pytest.CaptureFixture[str]) -> None:
    assert main([]) == 1
    assert "Mapty workout tracker" in capsys.readouterr().out
