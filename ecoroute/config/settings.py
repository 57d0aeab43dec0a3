"""Estimator settings resolved from environment variables."""

from __future__ import annotations

import math
import os
from typing import Optional

from pydantic import BaseModel, Field, model_validator

from ecoroute.adapters.fault_injection import DEFAULT_FAULT_RATE, clamp_rate
from ecoroute.domain.scoring import DEFAULT_TOP_N


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        value = float(raw)
    except ValueError:
        return default
    if not math.isfinite(value):
        return default
    return value


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


class EstimatorSettings(BaseModel):
    provider: str = Field(default="synthetic")
    fixture_path: Optional[str] = Field(default=None)
    fault_rate: float = Field(default=DEFAULT_FAULT_RATE)
    delay_min_ms: int = Field(default=1000, ge=0)
    delay_max_ms: int = Field(default=2000, ge=0)
    top_n: int = Field(default=DEFAULT_TOP_N, ge=1)

    @model_validator(mode="after")
    def _normalize(self) -> "EstimatorSettings":
        self.provider = self.provider.strip().lower() or "synthetic"
        self.fault_rate = clamp_rate(self.fault_rate)
        if self.delay_min_ms > self.delay_max_ms:
            self.delay_min_ms, self.delay_max_ms = self.delay_max_ms, self.delay_min_ms
        return self


def resolve_provider_name() -> str:
    # Unknown names are rejected by get_route_provider.
    return os.getenv("ROUTE_PROVIDER", "").strip().lower() or "synthetic"


def load_settings() -> EstimatorSettings:
    return EstimatorSettings(
        provider=resolve_provider_name(),
        fixture_path=os.getenv("ROUTE_FIXTURE_PATH", "").strip() or None,
        fault_rate=_env_float("ROUTE_FAULT_RATE", DEFAULT_FAULT_RATE),
        delay_min_ms=max(0, _env_int("ROUTE_DELAY_MIN_MS", 1000)),
        delay_max_ms=max(0, _env_int("ROUTE_DELAY_MAX_MS", 2000)),
        top_n=max(1, _env_int("ROUTE_TOP_N", DEFAULT_TOP_N)),
    )


__all__ = ["EstimatorSettings", "load_settings", "resolve_provider_name"]
