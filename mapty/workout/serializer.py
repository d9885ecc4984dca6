"""JSON payload for the stored workout list."""

from __future__ import annotations

import json
import math
from datetime import datetime
from typing import Any, Iterable

from mapty.workout.model import WORKOUT_KINDS, Cycling, Running, Workout


class StorageFormatError(ValueError):
    """Raised when a stored workout list is invalid."""


def dump_workouts(workouts: Iterable[Workout]) -> str:
    return json.dumps([_to_payload(workout) for workout in workouts], ensure_ascii=True)


def load_workouts(text: str) -> list[Workout]:
    try:
        data = json.loads(text)
    except (ValueError, RecursionError) as exc:
        raise StorageFormatError(f"Invalid JSON: {exc}") from exc

    if not isinstance(data, list):
        raise StorageFormatError("Stored workouts must be an array")

    out: list[Workout] = []
    seen: set[str] = set()
    for i, raw in enumerate(data):
        if not isinstance(raw, dict):
            raise StorageFormatError(f"Workout {i + 1}: must be an object")
        workout = _from_payload(raw, index=i)
        if workout.id in seen:
            raise StorageFormatError(f"Workout {i + 1}: duplicate id '{workout.id}'")
        seen.add(workout.id)
        out.append(workout)
    return out


def _to_payload(workout: Workout) -> dict[str, Any]:
    payload: dict[str, Any] = {
        "kind": workout.kind,
        "id": workout.id,
        "created_at": workout.created_at.isoformat(),
        "coords": [workout.coords[0], workout.coords[1]],
        "distance_km": workout.distance_km,
        "duration_min": workout.duration_min,
        "description": workout.description,
    }
    if isinstance(workout, Running):
        payload["cadence_spm"] = workout.cadence_spm
        payload["pace_min_per_km"] = workout.pace_min_per_km
    else:
        payload["elevation_gain_m"] = workout.elevation_gain_m
        payload["speed_km_per_h"] = workout.speed_km_per_h
    return payload


def _from_payload(raw: dict[str, Any], *, index: int) -> Workout:
    kind = raw.get("kind")
    if kind not in WORKOUT_KINDS:
        raise StorageFormatError(f"Workout {index + 1}: unknown kind {kind!r}")
    common = {
        "id": _parse_str(raw, "id", index),
        "created_at": _parse_datetime(raw, "created_at", index),
        "coords": _parse_coords(raw, index),
        "distance_km": _parse_positive(raw, "distance_km", index),
        "duration_min": _parse_positive(raw, "duration_min", index),
        "description": _parse_str(raw, "description", index),
    }
    if kind == "running":
        return Running(
            **common,
            cadence_spm=_parse_positive(raw, "cadence_spm", index),
            pace_min_per_km=_parse_positive(raw, "pace_min_per_km", index),
        )
    return Cycling(
        **common,
        elevation_gain_m=_parse_number(raw, "elevation_gain_m", index),
        speed_km_per_h=_parse_positive(raw, "speed_km_per_h", index),
    )


def _parse_str(raw: dict[str, Any], field_name: str, index: int) -> str:
    value = raw.get(field_name)
    if not isinstance(value, str) or not value:
        raise StorageFormatError(f"Workout {index + 1}: invalid {field_name}")
    return value


def _parse_number(raw: dict[str, Any], field_name: str, index: int) -> float:
    value = raw.get(field_name)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise StorageFormatError(f"Workout {index + 1}: invalid {field_name}")
    try:
        number = float(value)
    except OverflowError as exc:
        raise StorageFormatError(f"Workout {index + 1}: {field_name} is out of range") from exc
    if not math.isfinite(number):
        raise StorageFormatError(f"Workout {index + 1}: {field_name} must be finite")
    return number


def _parse_positive(raw: dict[str, Any], field_name: str, index: int) -> float:
    number = _parse_number(raw, field_name, index)
    if number <= 0:
        raise StorageFormatError(f"Workout {index + 1}: {field_name} must be > 0")
    return number


def _parse_datetime(raw: dict[str, Any], field_name: str, index: int) -> datetime:
    text = _parse_str(raw, field_name, index)
    try:
        return datetime.fromisoformat(text)
    except ValueError as exc:
        raise StorageFormatError(f"Workout {index + 1}: invalid {field_name}") from exc


def _parse_coords(raw: dict[str, Any], index: int) -> tuple[float, float]:
    value = raw.get("coords")
    if not isinstance(value, list) or len(value) != 2:
        raise StorageFormatError(f"Workout {index + 1}: coords must be [lat, lng]")
    pair = {"lat": value[0], "lng": value[1]}
    return (
        _parse_number(pair, "lat", index),
        _parse_number(pair, "lng", index),
    )
