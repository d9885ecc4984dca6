"""Workout domain models."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from datetime import datetime
from typing import Literal, Union
from uuid import uuid4

WorkoutKind = Literal["running", "cycling"]
Coords = tuple[float, float]

WORKOUT_KINDS: tuple[WorkoutKind, ...] = ("running", "cycling")

_MONTHS: tuple[str, ...] = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)


class WorkoutValidationError(ValueError):
    """Raised when workout input cannot be recorded."""

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message)
        self.field = field


@dataclass(frozen=True)
class Running:
    id: str
    created_at: datetime
    coords: Coords
    distance_km: float
    duration_min: float
    description: str
    cadence_spm: float
    pace_min_per_km: float
    kind: Literal["running"] = field(default="running", init=False)


@dataclass(frozen=True)
class Cycling:
    id: str
    created_at: datetime
    coords: Coords
    distance_km: float
    duration_min: float
    description: str
    elevation_gain_m: float
    speed_km_per_h: float
    kind: Literal["cycling"] = field(default="cycling", init=False)


Workout = Union[Running, Cycling]


def describe(kind: str, created_at: datetime) -> str:
    """Return the display title, e.g. ``"Running on March 15"``."""
    return f"{kind.capitalize()} on {_MONTHS[created_at.month - 1]} {created_at.day}"


def create_running(
    coords: Coords,
    distance_km: float,
    duration_min: float,
    cadence_spm: float,
    *,
    created_at: datetime | None = None,
    workout_id: str | None = None,
) -> Running:
    point = _check_coords(coords)
    distance = _positive(distance_km, "distance_km")
    duration = _positive(duration_min, "duration_min")
    cadence = _positive(cadence_spm, "cadence_spm")
    when = created_at or _now()
    return Running(
        id=workout_id or uuid4().hex,
        created_at=when,
        coords=point,
        distance_km=distance,
        duration_min=duration,
        description=describe("running", when),
        cadence_spm=cadence,
        pace_min_per_km=duration / distance,
    )


def create_cycling(
    coords: Coords,
    distance_km: float,
    duration_min: float,
    elevation_gain_m: float,
    *,
    created_at: datetime | None = None,
    workout_id: str | None = None,
) -> Cycling:
    point = _check_coords(coords)
    distance = _positive(distance_km, "distance_km")
    duration = _positive(duration_min, "duration_min")
    # Descents are recorded as negative gain.
    elevation = _finite(elevation_gain_m, "elevation_gain_m")
    when = created_at or _now()
    return Cycling(
        id=workout_id or uuid4().hex,
        created_at=when,
        coords=point,
        distance_km=distance,
        duration_min=duration,
        description=describe("cycling", when),
        elevation_gain_m=elevation,
        speed_km_per_h=distance / (duration / 60),
    )


def _now() -> datetime:
    return datetime.now().astimezone()


def _finite(raw: object, field_name: str) -> float:
    if isinstance(raw, bool):
        raise WorkoutValidationError(f"{field_name} must be a number", field_name)
    try:
        value = float(raw)  # type: ignore[arg-type]
    except (TypeError, ValueError, OverflowError) as exc:
        raise WorkoutValidationError(f"{field_name} must be a number", field_name) from exc
    if not math.isfinite(value):
        raise WorkoutValidationError(f"{field_name} must be a finite number", field_name)
    return value


def _positive(raw: object, field_name: str) -> float:
    value = _finite(raw, field_name)
    if value <= 0:
        raise WorkoutValidationError(f"{field_name} must be a positive number", field_name)
    return value


def _check_coords(coords: object) -> Coords:
    if isinstance(coords, (str, bytes)):
        raise WorkoutValidationError("coords must be a (lat, lng) pair", "coords")
    try:
        lat, lng = coords  # type: ignore[misc]
    except (TypeError, ValueError) as exc:
        raise WorkoutValidationError("coords must be a (lat, lng) pair", "coords") from exc
    return (_finite(lat, "coords"), _finite(lng, "coords"))
