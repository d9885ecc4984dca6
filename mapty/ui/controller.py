"""Controller between the web page and the workout store."""

from __future__ import annotations

from typing import Mapping

from mapty.core.state import MapState
from mapty.workout.model import Workout, WorkoutValidationError
from mapty.workout.store import WorkoutStore


class UIController:
    def __init__(self, store: WorkoutStore, state: MapState | None = None) -> None:
        self._store = store
        self.state = state or MapState()

    @property
    def store(self) -> WorkoutStore:
        return self._store

    def set_position(self, lat: float, lng: float) -> None:
        self.state.center = (lat, lng)
        self.state.located = True

    def select_location(self, lat: float, lng: float) -> None:
        self.state.pending_coords = (lat, lng)

    def cancel_selection(self) -> None:
        self.state.pending_coords = None

    def submit_workout(self, kind: str, raw_fields: Mapping[str, object]) -> Workout:
        coords = self.state.pending_coords
        if coords is None:
            raise WorkoutValidationError("Click on the map to choose a location first", "coords")
        workout = self._store.add_workout(kind, coords, raw_fields)
        self.state.pending_coords = None
        return workout

    def locate(self, workout_id: str) -> tuple[float, float] | None:
        workout = self._store.find_by_id(workout_id)
        if workout is None:
            return None
        self.state.center = workout.coords
        return workout.coords
