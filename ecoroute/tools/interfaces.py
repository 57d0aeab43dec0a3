"""Route provider protocol."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from ecoroute.domain.models import RouteCandidate


@runtime_checkable
class RouteProvider(Protocol):
    name: str

    def generate(self, from_address: str, to_address: str) -> list[RouteCandidate]: ...


__all__ = ["RouteProvider"]
