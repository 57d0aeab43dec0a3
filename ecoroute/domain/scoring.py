"""Deterministic route synthesis and eco-scoring.

Every figure derives from one 32-bit rolling hash of the two addresses, so the
same pair of addresses always yields the same candidates and ranking.
"""

from __future__ import annotations

import math
from collections.abc import Iterable
from typing import Callable

from ecoroute.domain.enums import TravelMode
from ecoroute.domain.models import RouteCandidate

TIME_WEIGHT = 0.6
CO2_WEIGHT = 0.4
CO2_SCALE = 10.0
DEFAULT_TOP_N = 3

_INT32_MASK = 0xFFFFFFFF
_INT32_SIGN = 0x80000000

# mode -> (distance factor, minutes per km, minutes jitter mod,
#          grams CO2 per km, grams jitter mod)
MODE_PROFILES: dict[TravelMode, tuple[float, float, int, float, int]] = {
    TravelMode.DRIVING: (1.0, 1.2, 10, 180.0, 100),
    TravelMode.BICYCLING: (1.1, 3.5, 15, 0.0, 0),
    TravelMode.TRANSIT: (1.2, 2.8, 20, 45.0, 30),
    TravelMode.WALKING: (0.9, 12.0, 25, 0.0, 0),
}

HashFunc = Callable[[str, str], int]


def to_int32(value: int) -> int:
    """Wrap an integer into the signed 32-bit range."""
    value &= _INT32_MASK
    return value - 0x100000000 if value & _INT32_SIGN else value


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def round_tenth(value: float) -> float:
    return math.floor(value * 10 + 0.5) / 10


def address_hash(text: str) -> int:
    """Signed 32-bit ``h = h*31 + c`` over the UTF-16 code units of ``text``."""
    encoded = text.encode("utf-16-le", "surrogatepass")
    h = 0
    for i in range(0, len(encoded), 2):
        unit = encoded[i] | (encoded[i + 1] << 8)
        h = to_int32(h * 31 + unit)
    return h


def route_hash(from_address: str, to_address: str) -> int:
    return abs(address_hash(from_address.strip() + to_address.strip()))


def base_distance(hash_value: int) -> int:
    return 5 + hash_value % 20


def eco_score(time_min: int, co2_g: int) -> int:
    return round_half_up(time_min * TIME_WEIGHT + (co2_g / CO2_SCALE) * CO2_WEIGHT)


def build_candidate(mode: TravelMode, hash_value: int) -> RouteCandidate:
    distance_factor, min_per_km, time_mod, co2_per_km, co2_mod = MODE_PROFILES[mode]
    base = base_distance(hash_value)
    distance = base * distance_factor
    time_min = round_half_up(base * min_per_km + hash_value % time_mod)
    co2_g = round_half_up(base * co2_per_km + hash_value % co2_mod) if co2_mod else 0
    return RouteCandidate(
        mode=mode,
        distance_km=round_tenth(distance),
        time_min=time_min,
        co2_g=co2_g,
        score=eco_score(time_min, co2_g),
    )


def build_candidates(hash_value: int) -> list[RouteCandidate]:
    """One candidate per mode, in generation order."""
    if hash_value < 0:
        raise ValueError(f"route hash must be non-negative, got {hash_value}")
    return [build_candidate(mode, hash_value) for mode in MODE_PROFILES]


def rank_candidates(
    candidates: Iterable[RouteCandidate],
    limit: int | None = DEFAULT_TOP_N,
) -> list[RouteCandidate]:
    # sorted() is stable: equal scores keep generation order.
    ranked = sorted(candidates, key=lambda c: c.score)
    if limit is None:
        return ranked
    return ranked[: max(0, limit)]


__all__ = [
    "DEFAULT_TOP_N",
    "HashFunc",
    "MODE_PROFILES",
    "address_hash",
    "base_distance",
    "build_candidate",
    "build_candidates",
    "eco_score",
    "rank_candidates",
    "round_half_up",
    "round_tenth",
    "route_hash",
    "to_int32",
]
