"""Synthetic route adapter based on the address hash."""

from __future__ import annotations

from ecoroute.domain.models import RouteCandidate
from ecoroute.domain.scoring import HashFunc, build_candidates, route_hash


class SyntheticRouteProvider:
    name = "synthetic"

    def __init__(self, hash_func: HashFunc = route_hash) -> None:
        self._hash_func = hash_func

    def generate(self, from_address: str, to_address: str) -> list[RouteCandidate]:
        return build_candidates(self._hash_func(from_address, to_address))
