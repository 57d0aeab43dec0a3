"""API request/response models."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field

from ecoroute.domain.models import RouteCandidate
from ecoroute.services.route_presenter import MapRegion, MapType


class RouteRequest(BaseModel):
    from_address: str = Field(max_length=500, description="Starting address")
    to_address: str = Field(max_length=500, description="Destination address")


class RoutesResponse(BaseModel):
    from_address: str
    to_address: str
    routes: list[RouteCandidate] = Field(default_factory=list)
    trace_id: str = Field(default="")


class PreviewRequest(BaseModel):
    route: RouteCandidate
    from_address: str = Field(default="", max_length=500)
    to_address: str = Field(default="", max_length=500)
    region: Optional[MapRegion] = None
    map_type: MapType = MapType.STANDARD


class HealthResponse(BaseModel):
    status: str = "ok"


class ErrorResponse(BaseModel):
    error: bool = True
    code: str = "UNKNOWN"
    message: str = ""
