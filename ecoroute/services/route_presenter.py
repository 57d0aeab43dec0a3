"""Presentation helpers for route lists and the mocked map preview."""

from __future__ import annotations

from enum import Enum
from typing import Any, Optional, Union

from pydantic import BaseModel, Field

from ecoroute.domain.enums import TravelMode
from ecoroute.domain.models import RouteCandidate

_MODE_ICONS = {
    TravelMode.DRIVING: "🚗",
    TravelMode.BICYCLING: "🚴",
    TravelMode.TRANSIT: "🚌",
    TravelMode.WALKING: "🚶",
}
_MODE_COLORS = {
    TravelMode.DRIVING: "#FF6B6B",
    TravelMode.BICYCLING: "#4ECDC4",
    TravelMode.TRANSIT: "#45B7D1",
    TravelMode.WALKING: "#96CEB4",
}
_DEFAULT_ICON = "🚗"
_DEFAULT_COLOR = "#007AFF"
POLYLINE_WIDTH = 3


class MapType(str, Enum):
    STANDARD = "standard"
    SATELLITE = "satellite"


def toggle_map_type(map_type: Union[MapType, str]) -> MapType:
    return MapType.SATELLITE if MapType(map_type) == MapType.STANDARD else MapType.STANDARD


def _as_mode(mode: Union[TravelMode, str]) -> Optional[TravelMode]:
    try:
        return TravelMode(mode)
    except ValueError:
        return None


def mode_icon(mode: Union[TravelMode, str]) -> str:
    return _MODE_ICONS.get(_as_mode(mode), _DEFAULT_ICON)


def mode_color(mode: Union[TravelMode, str]) -> str:
    return _MODE_COLORS.get(_as_mode(mode), _DEFAULT_COLOR)


def present_route(route: RouteCandidate) -> dict[str, Any]:
    return {
        **route.model_dump(mode="json"),
        "label": route.mode.value.upper(),
        "icon": mode_icon(route.mode),
        "color": mode_color(route.mode),
        "distance_text": f"{route.distance_km} km",
        "time_text": f"{route.time_min} min",
        "co2_text": f"{route.co2_g} g CO₂",
    }


def format_route_line(route: RouteCandidate) -> str:
    return (
        f"{mode_icon(route.mode)} {route.mode.value.upper():<10} score {route.score:<6}"
        f" {route.distance_km} km | {route.time_min} min | {route.co2_g} g CO₂"
    )


class Coordinate(BaseModel):
    latitude: float
    longitude: float


class MapRegion(BaseModel):
    latitude: float = 37.78825
    longitude: float = -122.4324
    latitude_delta: float = 0.0922
    longitude_delta: float = 0.0421


class MapMarker(BaseModel):
    coordinate: Coordinate
    title: str
    description: str
    symbol: str


class MapPreview(BaseModel):
    route: RouteCandidate
    region: MapRegion
    map_type: MapType = MapType.STANDARD
    path: list[Coordinate] = Field(default_factory=list)
    markers: list[MapMarker] = Field(default_factory=list)
    stroke_color: str = _DEFAULT_COLOR
    stroke_width: int = POLYLINE_WIDTH


def build_map_preview(
    route: RouteCandidate,
    from_address: str = "",
    to_address: str = "",
    region: Optional[MapRegion] = None,
    map_type: Union[MapType, str] = MapType.STANDARD,
) -> MapPreview:
    """Mock a start/waypoint/end path around the region centre.

    No geocoding happens; the path only gives the map something to draw.
    """
    area = region or MapRegion()
    lat, lon = area.latitude, area.longitude
    path = [
        Coordinate(latitude=lat - 0.01, longitude=lon - 0.01),
        Coordinate(latitude=lat - 0.005, longitude=lon),
        Coordinate(latitude=lat + 0.01, longitude=lon + 0.01),
    ]
    markers = [
        MapMarker(
            coordinate=path[0],
            title="Start",
            description=from_address.strip() or "Starting Point",
            symbol="🟢",
        ),
        MapMarker(
            coordinate=path[-1],
            title="Destination",
            description=to_address.strip() or "Destination Point",
            symbol="🔴",
        ),
    ]
    return MapPreview(
        route=route,
        region=area,
        map_type=MapType(map_type),
        path=path,
        markers=markers,
        stroke_color=mode_color(route.mode),
    )


__all__ = [
    "MapMarker",
    "MapPreview",
    "MapRegion",
    "MapType",
    "build_map_preview",
    "format_route_line",
    "mode_color",
    "mode_icon",
    "present_route",
    "toggle_map_type",
]
