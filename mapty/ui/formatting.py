"""Display helpers for workout markers and list items."""

from __future__ import annotations

from dataclasses import dataclass

from mapty.workout.model import Running, Workout

RUNNING_ICON = "🏃‍♂️"
CYCLING_ICON = "🚴‍♀️"


@dataclass(frozen=True)
class WorkoutDetail:
    icon: str
    value: str
    unit: str


def workout_icon(kind: str) -> str:
    return RUNNING_ICON if kind == "running" else CYCLING_ICON


def popup_text(workout: Workout) -> str:
    return f"{workout_icon(workout.kind)} {workout.description}"


def _fmt_value(value: float) -> str:
    return f"{value:g}"


def workout_details(workout: Workout) -> list[WorkoutDetail]:
    details = [
        WorkoutDetail(workout_icon(workout.kind), _fmt_value(workout.distance_km), "km"),
        WorkoutDetail("⏱", _fmt_value(workout.duration_min), "min"),
    ]
    if isinstance(workout, Running):
        details.append(WorkoutDetail("⚡️", f"{workout.pace_min_per_km:.2f}", "min/km"))
        details.append(WorkoutDetail("🦶🏼", _fmt_value(workout.cadence_spm), "spm"))
    else:
        details.append(WorkoutDetail("⚡️", f"{workout.speed_km_per_h:.2f}", "km/h"))
        details.append(WorkoutDetail("⛰", _fmt_value(workout.elevation_gain_m), "m"))
    return details
