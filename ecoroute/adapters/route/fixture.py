"""Fixture route adapter backed by a static JSON file."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional, Union

from pydantic import ValidationError

from ecoroute.domain.models import RouteCandidate
from ecoroute.shared.exceptions import FixtureError

DEFAULT_FIXTURE_PATH = Path(__file__).resolve().parents[2] / "data" / "routes.json"


def load_fixture(path: Union[str, Path]) -> list[RouteCandidate]:
    source = Path(path)
    try:
        raw = json.loads(source.read_text(encoding="utf-8"))
    except FileNotFoundError:
        raise FixtureError(source.name, f"fixture not found: {source}") from None
    except json.JSONDecodeError as exc:
        raise FixtureError(source.name, f"invalid JSON: {exc}") from None

    if isinstance(raw, dict):
        raw = raw.get("routes", [])
    if not isinstance(raw, list):
        raise FixtureError(source.name, "expected a list of routes")

    try:
        return [RouteCandidate.model_validate(item) for item in raw]
    except ValidationError as exc:
        raise FixtureError(source.name, f"invalid route entry: {exc.error_count()} error(s)") from None


class FixtureRouteProvider:
    """Returns the same pre-built routes for every address pair."""

    name = "fixture"

    def __init__(self, path: Optional[Union[str, Path]] = None) -> None:
        self.path = Path(path) if path else DEFAULT_FIXTURE_PATH
        self._routes: Optional[list[RouteCandidate]] = None

    def generate(self, from_address: str, to_address: str) -> list[RouteCandidate]:
        if self._routes is None:
            self._routes = load_fixture(self.path)
        return list(self._routes)
