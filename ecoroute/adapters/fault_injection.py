"""Simulated upstream failures for the route service.

Enabled by default at a 5% rate. Tune or disable with:
  ROUTE_FAULT_RATE=0.05   (0 disables, 1 fails every call)
"""

from __future__ import annotations

import math
import random
from typing import Optional

from ecoroute.domain.exceptions import TransientServiceError

DEFAULT_FAULT_RATE = 0.05
TRANSIENT_MESSAGE = "Unable to reach the route service. Please try again."


def clamp_rate(value: float, default: float = DEFAULT_FAULT_RATE) -> float:
    rate = float(value)
    if math.isnan(rate):
        return default
    return max(0.0, min(1.0, rate))


class TransientFaultInjector:
    def __init__(self, rate: float = DEFAULT_FAULT_RATE, rng: Optional[random.Random] = None) -> None:
        self.rate = clamp_rate(rate)
        self._rng = rng or random.Random()

    @property
    def enabled(self) -> bool:
        return self.rate > 0.0

    def maybe_fail(self) -> None:
        if not self.enabled:
            return
        if self._rng.random() < self.rate:
            raise TransientServiceError(TRANSIENT_MESSAGE)


__all__ = ["DEFAULT_FAULT_RATE", "TransientFaultInjector", "clamp_rate"]
