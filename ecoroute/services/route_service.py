"""Route estimation use-case: simulated latency, failure, validation, ranking."""

from __future__ import annotations

import asyncio
import random
from typing import Awaitable, Callable, Optional

from ecoroute.adapters.fault_injection import TransientFaultInjector
from ecoroute.adapters.provider_factory import get_route_provider
from ecoroute.config.settings import EstimatorSettings, load_settings
from ecoroute.domain.exceptions import DuplicateAddressError, InvalidInputError
from ecoroute.domain.models import RouteCandidate
from ecoroute.domain.scoring import DEFAULT_TOP_N, rank_candidates
from ecoroute.tools.interfaces import RouteProvider

SleepFunc = Callable[[float], Awaitable[None]]


def validate_addresses(from_address: str, to_address: str) -> tuple[str, str]:
    origin = (from_address or "").strip()
    destination = (to_address or "").strip()
    if not origin or not destination:
        raise InvalidInputError("Both addresses are required")
    if origin.lower() == destination.lower():
        raise DuplicateAddressError("Starting and destination addresses cannot be the same")
    return origin, destination


class RouteEstimator:
    """Ranks route options between two addresses by eco-score.

    ``estimate`` awaits a random delay, then may raise a simulated transient
    failure, then validates the addresses and returns the best ``top_n``
    candidates in ascending score order. Failures are never retried here.
    """

    def __init__(
        self,
        provider: RouteProvider,
        *,
        faults: Optional[TransientFaultInjector] = None,
        delay_range_ms: tuple[int, int] = (1000, 2000),
        top_n: int = DEFAULT_TOP_N,
        rng: Optional[random.Random] = None,
        sleep: SleepFunc = asyncio.sleep,
    ) -> None:
        self.provider = provider
        self.faults = faults if faults is not None else TransientFaultInjector()
        low, high = delay_range_ms
        self.delay_range_ms = (min(low, high), max(low, high))
        self.top_n = top_n
        self._rng = rng or random.Random()
        self._sleep = sleep

    def sample_delay_seconds(self) -> float:
        low, high = self.delay_range_ms
        return self._rng.uniform(low, high) / 1000.0

    def rank(self, from_address: str, to_address: str) -> list[RouteCandidate]:
        origin, destination = validate_addresses(from_address, to_address)
        return rank_candidates(self.provider.generate(origin, destination), self.top_n)

    def estimate_now(self, from_address: str, to_address: str) -> list[RouteCandidate]:
        self.faults.maybe_fail()
        return self.rank(from_address, to_address)

    async def estimate(self, from_address: str, to_address: str) -> list[RouteCandidate]:
        delay = self.sample_delay_seconds()
        if delay > 0:
            await self._sleep(delay)
        return self.estimate_now(from_address, to_address)


def build_route_estimator(settings: Optional[EstimatorSettings] = None) -> RouteEstimator:
    cfg = settings or load_settings()
    return RouteEstimator(
        get_route_provider(cfg.provider, fixture_path=cfg.fixture_path),
        faults=TransientFaultInjector(cfg.fault_rate),
        delay_range_ms=(cfg.delay_min_ms, cfg.delay_max_ms),
        top_n=cfg.top_n,
    )


__all__ = ["RouteEstimator", "build_route_estimator", "validate_addresses"]
