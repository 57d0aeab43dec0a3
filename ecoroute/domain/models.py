"""Pydantic domain models."""

from __future__ import annotations

from typing import Union

from pydantic import BaseModel, ConfigDict, Field

from ecoroute.domain.enums import TravelMode


class RouteCandidate(BaseModel):
    model_config = ConfigDict(frozen=True)

    mode: TravelMode
    distance_km: float = Field(gt=0)
    time_min: int = Field(ge=0)
    co2_g: int = Field(ge=0)
    # Synthesized routes score in whole points, fixture routes may carry a decimal.
    score: Union[int, float] = Field(ge=0)
