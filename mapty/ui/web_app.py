"""NiceGUI web UI for Mapty."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, cast

from nicegui import Client, ui

from mapty.core.state import DEFAULT_CENTER, DEFAULT_ZOOM, MapState
from mapty.ui.controller import UIController
from mapty.ui.formatting import popup_text, workout_details
from mapty.workout.model import WORKOUT_KINDS, Workout, WorkoutValidationError
from mapty.workout.storage import LocalStorage
from mapty.workout.store import WorkoutStore

logger = logging.getLogger(__name__)

TILE_URL = "https://{s}.tile.openstreetmap.fr/hot/{z}/{x}/{y}.png"
TILE_ATTRIBUTION = '&copy; <a href="http://www.openstreetmap.org/copyright">OpenStreetMap</a>'
GEOLOCATION_TIMEOUT_SEC = 10.0

_STYLE = """
<style>
  .running-popup .leaflet-popup-content-wrapper { border-left: 5px solid #00c46a; }
  .cycling-popup .leaflet-popup-content-wrapper { border-left: 5px solid #ffb545; }
  .mp-workout { cursor: pointer; border-left: 5px solid transparent; }
  .mp-workout--running { border-left-color: #00c46a; }
  .mp-workout--cycling { border-left-color: #ffb545; }
</style>
"""

# Resolves instead of rejecting so the error message reaches Python.
_GEOLOCATION_JS = """
new Promise((resolve) => {
  if (!navigator.geolocation) {
    resolve({error: 'Could not get your position'});
    return;
  }
  navigator.geolocation.getCurrentPosition(
    (position) => resolve({lat: position.coords.latitude, lng: position.coords.longitude}),
    (error) => resolve({error: error.message}),
  );
})
"""


def _popup_options(workout: Workout) -> dict[str, Any]:
    return {
        "maxWidth": 250,
        "minWidth": 150,
        "autoClose": True,
        "closeOnClick": True,
        "className": f"{workout.kind}-popup",
    }


def run_web_ui(
    *,
    host: str = "127.0.0.1",
    port: int = 8088,
    storage_dir: Path | None = None,
    zoom: int = DEFAULT_ZOOM,
    fallback_center: tuple[float, float] = DEFAULT_CENTER,
) -> int:
    store = WorkoutStore(LocalStorage(storage_dir))
    store.load()

    @ui.page("/")
    async def index(client: Client) -> None:
        ui.add_head_html(_STYLE)
        controller = UIController(store, MapState(center=fallback_center, zoom=zoom))

        with ui.row().classes("w-full h-screen no-wrap gap-0"):
            with ui.column().classes("w-[420px] h-full p-4 gap-3 overflow-auto"):
                ui.label("Mapty").classes("text-2xl font-bold")
                with ui.card().classes("w-full") as form_card:
                    kind_select = ui.select(
                        {kind: kind.capitalize() for kind in WORKOUT_KINDS},
                        value="running",
                        label="Type",
                    ).classes("w-full")
                    distance_input = ui.input("Distance", placeholder="km").classes("w-full")
                    duration_input = ui.input("Duration", placeholder="min").classes("w-full")
                    cadence_input = ui.input("Cadence", placeholder="step/min").classes("w-full")
                    elevation_input = ui.input("Elev Gain", placeholder="meters").classes("w-full")
                    with ui.row().classes("w-full justify-end gap-2"):
                        cancel_btn = ui.button("Cancel").props("outline")
                        submit_btn = ui.button("OK").props("color=primary")
                workout_list = ui.column().classes("w-full gap-2")
            leaflet = ui.leaflet(center=controller.state.center, zoom=controller.state.zoom).classes(
                "flex-grow h-full"
            )

        leaflet.clear_layers()
        leaflet.tile_layer(
            url_template=TILE_URL,
            options={"maxZoom": 19, "attribution": TILE_ATTRIBUTION},
        )
        form_card.set_visibility(False)
        elevation_input.set_visibility(False)

        def render_marker(workout: Workout) -> None:
            marker = leaflet.marker(latlng=workout.coords)
            marker.run_method("bindPopup", popup_text(workout), _popup_options(workout))
            marker.run_method("openPopup")

        def render_workout(workout: Workout) -> None:
            with workout_list:
                card = ui.card().classes(f"w-full mp-workout mp-workout--{workout.kind}")
                with card:
                    ui.label(workout.description).classes("text-lg font-semibold")
                    with ui.row().classes("gap-4"):
                        for detail in workout_details(workout):
                            ui.label(f"{detail.icon} {detail.value} {detail.unit}")
            card.move(workout_list, target_index=0)
            card.on("click", lambda _e, workout_id=workout.id: move_to_workout(workout_id))

        def on_workout_added(workout: Workout) -> None:
            render_marker(workout)
            render_workout(workout)

        def move_to_workout(workout_id: str) -> None:
            coords = controller.locate(workout_id)
            if coords is None:
                return
            leaflet.run_map_method(
                "setView",
                list(coords),
                controller.state.zoom,
                {"animate": True, "duration": 1, "easeLinearity": 0.1},
            )

        def clear_form() -> None:
            for field in (distance_input, duration_input, cadence_input, elevation_input):
                field.value = ""

        def hide_form() -> None:
            clear_form()
            form_card.set_visibility(False)

        def on_map_click(e: Any) -> None:
            latlng = e.args["latlng"]
            controller.select_location(float(latlng["lat"]), float(latlng["lng"]))
            form_card.set_visibility(True)
            distance_input.run_method("focus")

        def on_kind_change() -> None:
            running = kind_select.value == "running"
            cadence_input.set_visibility(running)
            elevation_input.set_visibility(not running)

        def on_cancel() -> None:
            controller.cancel_selection()
            hide_form()

        def on_submit() -> None:
            kind = cast(str, kind_select.value)
            raw_fields = {
                "distance_km": distance_input.value,
                "duration_min": duration_input.value,
                "cadence_spm": cadence_input.value,
                "elevation_gain_m": elevation_input.value,
            }
            try:
                controller.submit_workout(kind, raw_fields)
            except WorkoutValidationError as exc:
                ui.notify(str(exc), color="negative")
                return
            hide_form()

        async def locate_user() -> None:
            try:
                result = await ui.run_javascript(_GEOLOCATION_JS, timeout=GEOLOCATION_TIMEOUT_SEC)
            except TimeoutError:
                result = {"error": "Could not get your position"}
            if not isinstance(result, dict) or "error" in result:
                message = result.get("error") if isinstance(result, dict) else None
                logger.info("Geolocation unavailable: %s", message)
                ui.notify(str(message or "Could not get your position"), color="negative")
                return
            controller.set_position(float(result["lat"]), float(result["lng"]))
            leaflet.set_center(controller.state.center)

        for workout in store.workouts:
            on_workout_added(workout)

        store.subscribe(on_workout_added)
        client.on_disconnect(lambda: store.unsubscribe(on_workout_added))

        leaflet.on("map-click", on_map_click)
        kind_select.on_value_change(lambda _: on_kind_change())
        cancel_btn.on_click(on_cancel)
        submit_btn.on_click(on_submit)
        for field in (distance_input, duration_input, cadence_input, elevation_input):
            field.on("keydown.enter", on_submit)

        await client.connected()
        await locate_user()

    logger.info("Serving Mapty on http://%s:%d with %d stored workouts", host, port, len(store.workouts))
    ui.run(host=host, port=port, reload=False, title="Mapty", show=False)
    return 0
