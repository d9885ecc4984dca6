from __future__ import annotations

import json
from datetime import datetime, timezone

import pytest

from mapty.workout.model import create_cycling, create_running
from mapty.workout.serializer import StorageFormatError, dump_workouts, load_workouts


def _mixed_workouts() -> list:
    return [
        create_running(
            (51.5, -0.12),
            5.2,
            24,
            178,
            created_at=datetime(2026, 3, 15, 8, 0, tzinfo=timezone.utc),
        ),
        create_cycling(
            (48.85, 2.35),
            27,
            95,
            -50,
            created_at=datetime(2026, 4, 2, 18, 45, 12, 345678, tzinfo=timezone.utc),
        ),
        create_running((40.4, -3.7), 10, 52.5, 172),
    ]


def test_dump_and_load_preserve_every_field_and_order() -> None:
    original = _mixed_workouts()

    restored = load_workouts(dump_workouts(original))

    assert restored == original
    assert [w.kind for w in restored] == ["running", "cycling", "running"]


def test_dump_writes_kind_specific_fields() -> None:
    payload = json.loads(dump_workouts(_mixed_workouts()[:2]))

    assert payload[0]["kind"] == "running"
    assert payload[0]["coords"] == [51.5, -0.12]
    assert "pace_min_per_km" in payload[0]
    assert "speed_km_per_h" not in payload[0]
    assert payload[1]["kind"] == "cycling"
    assert payload[1]["elevation_gain_m"] == -50
    assert payload[1]["description"] == "Cycling on April 2"


def test_load_keeps_stored_description_verbatim() -> None:
    payload = json.loads(dump_workouts(_mixed_workouts()[:1]))
    payload[0]["description"] = "Running on some day"

    restored = load_workouts(json.dumps(payload))

    assert restored[0].description == "Running on some day"


@pytest.mark.parametrize(
    "text",
    [
        "not json",
        '{"kind": "running"}',
        "[1, 2]",
        '[{"kind": "swimming"}]',
        '[{"kind": "running", "id": "a"}]',
        "[" + "1" * 5000 + "]",
        "[" * 200000,
    ],
)
def test_load_rejects_malformed_payloads(text: str) -> None:
    with pytest.raises(StorageFormatError):
        load_workouts(text)


def test_load_rejects_bad_field_types() -> None:
    payload = json.loads(dump_workouts(_mixed_workouts()[:1]))
    payload[0]["distance_km"] = "5.2"

    with pytest.raises(StorageFormatError):
        load_workouts(json.dumps(payload))


def test_load_rejects_duplicate_ids() -> None:
    payload = json.loads(dump_workouts(_mixed_workouts()[:1]))

    with pytest.raises(StorageFormatError):
        load_workouts(json.dumps(payload + payload))


@pytest.mark.parametrize(
    ("field_name", "value"),
    [
        ("distance_km", -5),
        ("duration_min", 0),
        ("cadence_spm", -178),
        ("distance_km", 10**400),
    ],
)
def test_load_rejects_values_a_workout_cannot_have(field_name: str, value: int) -> None:
    payload = json.loads(dump_workouts(_mixed_workouts()[:1]))
    payload[0][field_name] = value

    with pytest.raises(StorageFormatError):
        load_workouts(json.dumps(payload))


def test_load_allows_negative_elevation() -> None:
    payload = json.loads(dump_workouts(_mixed_workouts()[1:2]))
    payload[0]["elevation_gain_m"] = -120.0

    assert load_workouts(json.dumps(payload))[0].elevation_gain_m == -120.0
