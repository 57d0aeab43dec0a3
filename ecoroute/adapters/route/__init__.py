"""Route adapters."""

from ecoroute.adapters.route.fixture import FixtureRouteProvider
from ecoroute.adapters.route.synthetic import SyntheticRouteProvider

__all__ = ["FixtureRouteProvider", "SyntheticRouteProvider"]
