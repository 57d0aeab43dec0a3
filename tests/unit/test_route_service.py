"""RouteEstimator behaviour tests."""

from __future__ import annotations

import asyncio
import random

import pytest

from ecoroute.adapters.fault_injection import TransientFaultInjector
from ecoroute.adapters.route.fixture import FixtureRouteProvider
from ecoroute.adapters.route.synthetic import SyntheticRouteProvider
from ecoroute.config.settings import EstimatorSettings
from ecoroute.domain.enums import TravelMode
from ecoroute.domain.exceptions import (
    DuplicateAddressError,
    InvalidInputError,
    TransientServiceError,
)
from ecoroute.services.route_service import (
    RouteEstimator,
    build_route_estimator,
    validate_addresses,
)


class _RecordingSleep:
    def __init__(self) -> None:
        self.calls: list[float] = []

    async def __call__(self, seconds: float) -> None:
        self.calls.append(seconds)


def _estimator(**kw) -> RouteEstimator:
    kw.setdefault("faults", TransientFaultInjector(0.0))
    kw.setdefault("delay_range_ms", (0, 0))
    return RouteEstimator(kw.pop("provider", SyntheticRouteProvider()), **kw)


def test_validate_addresses_trims():
    assert validate_addresses("  123 Main St ", "456 Oak Ave\n") == ("123 Main St", "456 Oak Ave")


@pytest.mark.parametrize(
    "origin, destination",
    [("", "123 Main St"), ("123 Main St", ""), ("   ", "123 Main St"), ("123 Main St", "\t"), (None, "x")],
)
def test_blank_address_is_invalid(quiet_estimator, origin, destination):
    with pytest.raises(InvalidInputError) as exc_info:
        quiet_estimator.estimate_now(origin, destination)
    assert exc_info.value.message == "Both addresses are required"


def test_duplicate_address_is_case_insensitive(quiet_estimator):
    with pytest.raises(DuplicateAddressError):
        quiet_estimator.estimate_now("123 Main St", "123 MAIN ST")
    with pytest.raises(DuplicateAddressError):
        quiet_estimator.estimate_now(" 123 Main St", "123 main st  ")


def test_estimate_returns_top_three_non_decreasing(quiet_estimator):
    routes = asyncio.run(quiet_estimator.estimate("123 Main St", "456 Oak Ave"))
    assert len(routes) == 3
    scores = [r.score for r in routes]
    assert scores == sorted(scores)
    assert len({r.mode for r in routes}) == 3


def test_estimate_is_deterministic(quiet_estimator):
    first = quiet_estimator.estimate_now("123 Main St", "456 Oak Ave")
    second = asyncio.run(quiet_estimator.estimate("123 Main St", "456 Oak Ave"))
    assert first == second
    assert [r.model_dump() for r in first] == [r.model_dump() for r in second]


def test_swapped_addresses_may_differ(quiet_estimator):
    forward = quiet_estimator.rank("X", "Y")
    backward = quiet_estimator.rank("Y", "X")
    assert forward != backward


def test_pinned_hash_excludes_highest_scoring_mode():
    estimator = _estimator(provider=SyntheticRouteProvider(hash_func=lambda _a, _b: 7))
    routes = estimator.estimate_now("A", "B")
    assert [r.mode for r in routes] == [TravelMode.BICYCLING, TravelMode.TRANSIT, TravelMode.WALKING]
    assert [r.score for r in routes] == [29, 46, 91]


def test_top_n_is_configurable():
    estimator = _estimator(top_n=4)
    assert len(estimator.estimate_now("A", "B")) == 4


def test_hash_receives_trimmed_addresses():
    seen = []

    def _hash(a: str, b: str) -> int:
        seen.append((a, b))
        return 7

    _estimator(provider=SyntheticRouteProvider(hash_func=_hash)).estimate_now("  A ", " B")
    assert seen == [("A", "B")]


def test_transient_failure_raised_before_validation():
    estimator = _estimator(faults=TransientFaultInjector(1.0))
    with pytest.raises(TransientServiceError):
        estimator.estimate_now("", "")
    with pytest.raises(TransientServiceError):
        asyncio.run(estimator.estimate("123 Main St", "456 Oak Ave"))


def test_transient_failure_is_probabilistic():
    estimator = _estimator(faults=TransientFaultInjector(0.5, rng=random.Random(3)))
    outcomes = []
    for _ in range(40):
        try:
            estimator.estimate_now("A", "B")
            outcomes.append("ok")
        except TransientServiceError:
            outcomes.append("fail")
    assert "ok" in outcomes
    assert "fail" in outcomes


def test_delay_is_sampled_within_range():
    sleep = _RecordingSleep()
    estimator = _estimator(delay_range_ms=(1000, 2000), sleep=sleep, rng=random.Random(11))
    for _ in range(5):
        asyncio.run(estimator.estimate("A", "B"))
    assert len(sleep.calls) == 5
    assert all(1.0 <= s <= 2.0 for s in sleep.calls)


def test_inverted_delay_range_is_normalized():
    estimator = _estimator(delay_range_ms=(2000, 1000))
    assert estimator.delay_range_ms == (1000, 2000)


def test_pending_delay_can_be_cancelled():
    estimator = _estimator(delay_range_ms=(60_000, 60_000))

    async def _run() -> bool:
        task = asyncio.create_task(estimator.estimate("A", "B"))
        await asyncio.sleep(0)
        task.cancel()
        try:
            await task
        except asyncio.CancelledError:
            return task.cancelled()
        return False

    assert asyncio.run(_run()) is True


def test_concurrent_estimates_are_independent():
    estimator = _estimator(delay_range_ms=(1, 5))

    async def _run():
        return await asyncio.gather(
            estimator.estimate("X", "Y"),
            estimator.estimate("Y", "X"),
            estimator.estimate("X", "Y"),
        )

    first, second, third = asyncio.run(_run())
    assert first == third
    assert first != second


def test_fixture_provider_goes_through_same_ranking():
    estimator = _estimator(provider=FixtureRouteProvider())
    routes = estimator.estimate_now("123 Main St", "456 Oak Ave")
    assert [r.mode for r in routes] == [TravelMode.BICYCLING, TravelMode.TRANSIT, TravelMode.WALKING]
    with pytest.raises(DuplicateAddressError):
        estimator.estimate_now("a", "A")


def test_build_route_estimator_from_settings():
    settings = EstimatorSettings(provider="fixture", fault_rate=0.0, delay_min_ms=0, delay_max_ms=0, top_n=2)
    estimator = build_route_estimator(settings)
    assert estimator.provider.name == "fixture"
    assert estimator.faults.enabled is False
    assert estimator.top_n == 2
    assert len(estimator.estimate_now("A", "B")) == 2


def test_build_route_estimator_reads_environment(monkeypatch):
    monkeypatch.setenv("ROUTE_FAULT_RATE", "0")
    monkeypatch.setenv("ROUTE_DELAY_MIN_MS", "0")
    monkeypatch.setenv("ROUTE_DELAY_MAX_MS", "0")
    estimator = build_route_estimator()
    assert estimator.provider.name == "synthetic"
    assert estimator.delay_range_ms == (0, 0)
    assert len(asyncio.run(estimator.estimate("A", "B"))) == 3
