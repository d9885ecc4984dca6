"""In-memory workout list backed by a local storage slot."""

from __future__ import annotations

import logging
import math
from typing import Callable, Mapping

from mapty.workout.model import (
    Coords,
    Workout,
    WorkoutValidationError,
    create_cycling,
    create_running,
)
from mapty.workout.serializer import StorageFormatError, dump_workouts, load_workouts
from mapty.workout.storage import LocalStorage

logger = logging.getLogger(__name__)

STORAGE_KEY = "workouts"

WorkoutListener = Callable[[Workout], None]


class WorkoutStore:
    """Owns the ordered workout list.

    Every successful add writes the whole list back to storage, so the stored
    slot is always a complete snapshot.
    """

    def __init__(self, storage: LocalStorage, key: str = STORAGE_KEY) -> None:
        self._storage = storage
        self._key = key
        self._workouts: list[Workout] = []
        self._listeners: list[WorkoutListener] = []

    @property
    def workouts(self) -> tuple[Workout, ...]:
        return tuple(self._workouts)

    def subscribe(self, callback: WorkoutListener) -> None:
        self._listeners.append(callback)

    def unsubscribe(self, callback: WorkoutListener) -> None:
        if callback in self._listeners:
            self._listeners.remove(callback)

    def add_workout(
        self,
        kind: str,
        coords: Coords,
        raw_fields: Mapping[str, object],
    ) -> Workout:
        distance = _coerce_number(raw_fields.get("distance_km"))
        duration = _coerce_number(raw_fields.get("duration_min"))

        workout: Workout
        if kind == "running":
            workout = create_running(
                coords,
                distance,
                duration,
                _coerce_number(raw_fields.get("cadence_spm")),
            )
        elif kind == "cycling":
            workout = create_cycling(
                coords,
                distance,
                duration,
                _coerce_number(raw_fields.get("elevation_gain_m")),
            )
        else:
            raise WorkoutValidationError(f"Unknown workout type {kind!r}", "kind")

        self._workouts.append(workout)
        try:
            self._persist()
        except OSError:
            self._workouts.pop()
            raise
        logger.info("Recorded %s %s (%s)", workout.kind, workout.id, workout.description)
        for callback in list(self._listeners):
            # The workout is already stored; a broken renderer must not undo that.
            try:
                callback(workout)
            except Exception:
                logger.exception("Workout listener failed for %s", workout.id)
        return workout

    def find_by_id(self, workout_id: str) -> Workout | None:
        return next((w for w in self._workouts if w.id == workout_id), None)

    def serialize(self) -> str:
        return dump_workouts(self._workouts)

    def deserialize(self, payload: str | None) -> list[Workout]:
        if not payload or not payload.strip():
            self._workouts = []
            return []
        try:
            self._workouts = load_workouts(payload)
        except StorageFormatError as exc:
            logger.warning("Ignoring stored workouts: %s", exc)
            self._workouts = []
        return list(self._workouts)

    def load(self) -> list[Workout]:
        try:
            payload = self._storage.get_item(self._key)
        except UnicodeDecodeError as exc:
            logger.warning("Ignoring stored workouts: %s", exc)
            payload = None
        workouts = self.deserialize(payload)
        logger.debug("Loaded %d workouts from %s", len(workouts), self._storage.path_for(self._key))
        return workouts

    def reset(self) -> None:
        self._storage.remove_item(self._key)
        self._workouts = []
        logger.info("Cleared stored workouts")

    def _persist(self) -> None:
        self._storage.set_item(self._key, self.serialize())


def _coerce_number(raw: object) -> float:
    # Mirrors a number input: blank is 0, anything unparsable is NaN.
    if raw is None:
        return 0.0
    if isinstance(raw, bool):
        return math.nan
    if isinstance(raw, (int, float)):
        return float(raw)
    text = str(raw).strip()
    if not text:
        return 0.0
    if "_" in text:
        return math.nan
    try:
        return float(text)
    except ValueError:
        return math.nan
