"""pytest global fixtures — environment isolation."""

import pytest

_ROUTE_ENV = (
    "ROUTE_PROVIDER",
    "ROUTE_FIXTURE_PATH",
    "ROUTE_FAULT_RATE",
    "ROUTE_DELAY_MIN_MS",
    "ROUTE_DELAY_MAX_MS",
    "ROUTE_TOP_N",
)


@pytest.fixture(autouse=True)
def clean_route_env(monkeypatch):
    """Tests never inherit estimator settings from the shell or a .env file."""
    for name in _ROUTE_ENV:
        monkeypatch.delenv(name, raising=False)
    yield


@pytest.fixture
def quiet_estimator():
    """Synthetic estimator without latency or injected failures."""
    from ecoroute.adapters.fault_injection import TransientFaultInjector
    from ecoroute.adapters.route.synthetic import SyntheticRouteProvider
    from ecoroute.services.route_service import RouteEstimator

    return RouteEstimator(
        SyntheticRouteProvider(),
        faults=TransientFaultInjector(0.0),
        delay_range_ms=(0, 0),
    )
