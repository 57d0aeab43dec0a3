"""Concrete route provider selection and wiring."""

from __future__ import annotations

from typing import Optional

from ecoroute.adapters.route.fixture import FixtureRouteProvider
from ecoroute.adapters.route.synthetic import SyntheticRouteProvider
from ecoroute.shared.exceptions import ConfigError
from ecoroute.tools.interfaces import RouteProvider

AVAILABLE_PROVIDERS = ("synthetic", "fixture")


def get_route_provider(name: str = "synthetic", *, fixture_path: Optional[str] = None) -> RouteProvider:
    key = (name or "").strip().lower()
    if key == "synthetic":
        return SyntheticRouteProvider()
    if key == "fixture":
        return FixtureRouteProvider(fixture_path)
    raise ConfigError(f"Unknown route provider: {name!r} (expected one of {', '.join(AVAILABLE_PROVIDERS)})")


__all__ = ["AVAILABLE_PROVIDERS", "get_route_provider"]
