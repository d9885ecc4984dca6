"""Terminal CLI entrypoint for Mapty."""

from __future__ import annotations

import argparse
from pathlib import Path

from mapty.core.state import DEFAULT_CENTER, DEFAULT_ZOOM
from mapty.logging_config import VALID_LEVELS, configure_logging
from mapty.ui.formatting import workout_details
from mapty.workout.storage import LocalStorage
from mapty.workout.store import WorkoutStore


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Mapty workout tracker")
    parser.add_argument(
        "--ui-web",
        action="store_true",
        help="Launch web UI (NiceGUI) with the workout map",
    )
    parser.add_argument(
        "--web-host",
        default="127.0.0.1",
        help="Host bind for --ui-web",
    )
    parser.add_argument(
        "--web-port",
        type=int,
        default=8088,
        help="Port for --ui-web",
    )
    parser.add_argument(
        "--storage-dir",
        type=Path,
        default=None,
        help="Directory holding stored workouts (default: ~/.mapty/storage)",
    )
    parser.add_argument(
        "--zoom",
        type=int,
        default=DEFAULT_ZOOM,
        help="Map zoom level used when centering on a workout",
    )
    parser.add_argument(
        "--lat",
        type=float,
        default=DEFAULT_CENTER[0],
        help="Map latitude used when the browser position is unavailable",
    )
    parser.add_argument(
        "--lng",
        type=float,
        default=DEFAULT_CENTER[1],
        help="Map longitude used when the browser position is unavailable",
    )
    parser.add_argument("--list", action="store_true", help="Print stored workouts")
    parser.add_argument("--reset", action="store_true", help="Delete all stored workouts")
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=VALID_LEVELS,
        type=str.upper,
        help="Logging level",
    )
    parser.add_argument(
        "--log-dir",
        type=Path,
        default=None,
        help="Also write logs to <dir>/mapty.log",
    )
    return parser


def run_list(storage_dir: Path | None = None) -> int:
    store = WorkoutStore(LocalStorage(storage_dir))
    workouts = store.load()

    if not workouts:
        print("No workouts recorded")
        return 0

    for workout in workouts:
        details = " | ".join(f"{d.value} {d.unit}" for d in workout_details(workout))
        print(f"{workout.description:<24} {details}")
    return 0


def run_reset(storage_dir: Path | None = None) -> int:
    store = WorkoutStore(LocalStorage(storage_dir))
    store.reset()
    print("Stored workouts cleared")
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level, args.log_dir)

    if args.reset:
        return run_reset(args.storage_dir)
    if args.list:
        return run_list(args.storage_dir)
    if args.ui_web:
        from mapty.ui.web_app import run_web_ui

        return run_web_ui(
            host=args.web_host,
            port=args.web_port,
            storage_dir=args.storage_dir,
            zoom=args.zoom,
            fallback_center=(args.lat, args.lng),
        )

    parser.print_help()
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
