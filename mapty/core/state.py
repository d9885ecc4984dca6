"""Shared map state for the web UI."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_CENTER: tuple[float, float] = (51.505, -0.09)
DEFAULT_ZOOM = 13


@dataclass
class MapState:
    center: tuple[float, float] = DEFAULT_CENTER
    zoom: int = DEFAULT_ZOOM
    pending_coords: tuple[float, float] | None = None
    located: bool = False
