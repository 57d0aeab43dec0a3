"""Caller-owned route search state with a reducer.

The estimator never touches this state. Front ends keep one ``RouteStore``
per user session and feed it estimator results through ``dispatch``.
"""

from __future__ import annotations

import asyncio
from collections.abc import Mapping
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, Field

from ecoroute.domain.exceptions import RouteEstimateError
from ecoroute.domain.models import RouteCandidate


class RouteAction(str, Enum):
    SET_LOADING = "SET_LOADING"
    SET_ROUTES = "SET_ROUTES"
    SET_ERROR = "SET_ERROR"
    SET_ADDRESSES = "SET_ADDRESSES"
    SELECT_ROUTE = "SELECT_ROUTE"
    RESET = "RESET"


class RouteState(BaseModel):
    routes: list[RouteCandidate] = Field(default_factory=list)
    loading: bool = False
    error: Optional[str] = None
    from_address: str = ""
    to_address: str = ""
    selected: Optional[RouteCandidate] = None


def reduce(state: RouteState, action: Mapping[str, Any]) -> RouteState:
    kind = action.get("type")
    if kind == RouteAction.SET_LOADING:
        return state.model_copy(update={"loading": bool(action.get("payload"))})
    if kind == RouteAction.SET_ROUTES:
        return state.model_copy(
            update={
                "routes": list(action.get("payload") or []),
                "loading": False,
                "error": None,
                "selected": None,
            }
        )
    if kind == RouteAction.SET_ERROR:
        return state.model_copy(update={"error": action.get("payload"), "loading": False})
    if kind == RouteAction.SET_ADDRESSES:
        return state.model_copy(
            update={
                "from_address": str(action.get("from", "")),
                "to_address": str(action.get("to", "")),
            }
        )
    if kind == RouteAction.SELECT_ROUTE:
        index = action.get("payload")
        if not isinstance(index, int) or not 0 <= index < len(state.routes):
            return state
        return state.model_copy(update={"selected": state.routes[index]})
    if kind == RouteAction.RESET:
        return RouteState()
    return state


class RouteStore:
    def __init__(self, initial: Optional[RouteState] = None) -> None:
        self.state = initial or RouteState()

    def dispatch(self, action: Mapping[str, Any]) -> RouteState:
        self.state = reduce(self.state, action)
        return self.state

    async def search(self, estimator: Any, from_address: str, to_address: str) -> RouteState:
        """Run one search and fold the outcome into the state.

        A failed search records the error message verbatim and leaves the
        previously shown routes untouched.
        """
        if not from_address.strip() or not to_address.strip():
            return self.dispatch({"type": RouteAction.SET_ERROR, "payload": "Please enter both addresses"})

        self.dispatch({"type": RouteAction.SET_LOADING, "payload": True})
        self.dispatch({"type": RouteAction.SET_ADDRESSES, "from": from_address, "to": to_address})
        try:
            routes = await estimator.estimate(from_address, to_address)
        except RouteEstimateError as exc:
            return self.dispatch({"type": RouteAction.SET_ERROR, "payload": exc.message})
        except (asyncio.CancelledError, Exception):
            self.dispatch({"type": RouteAction.SET_LOADING, "payload": False})
            raise
        return self.dispatch({"type": RouteAction.SET_ROUTES, "payload": routes})


__all__ = ["RouteAction", "RouteState", "RouteStore", "reduce"]
