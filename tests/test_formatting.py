from __future__ import annotations

from datetime import datetime

from mapty.ui.formatting import (
    CYCLING_ICON,
    RUNNING_ICON,
    popup_text,
    workout_details,
)
from mapty.workout.model import create_cycling, create_running

DAY = datetime(2026, 3, 15)


def test_running_details() -> None:
    workout = create_running((51.5, -0.12), 5.2, 24, 178, created_at=DAY)

    details = workout_details(workout)

    assert [(d.value, d.unit) for d in details] == [
        ("5.2", "km"),
        ("24", "min"),
        ("4.62", "min/km"),
        ("178", "spm"),
    ]
    assert details[0].icon == RUNNING_ICON
    assert popup_text(workout) == f"{RUNNING_ICON} Running on March 15"


def test_cycling_details() -> None:
    workout = create_cycling((51.5, -0.12), 27, 95, -12.5, created_at=DAY)

    details = workout_details(workout)

    assert [(d.value, d.unit) for d in details] == [
        ("27", "km"),
        ("95", "min"),
        ("17.05", "km/h"),
        ("-12.5", "m"),
    ]
    assert popup_text(workout).startswith(CYCLING_ICON)
