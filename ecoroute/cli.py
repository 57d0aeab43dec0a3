"""ecoroute CLI entry point."""

from __future__ import annotations

import argparse
import asyncio
import json
import sys
from typing import Optional, Sequence

from dotenv import load_dotenv

from ecoroute.adapters.provider_factory import AVAILABLE_PROVIDERS
from ecoroute.config.settings import load_settings
from ecoroute.domain.exceptions import RouteEstimateError, TransientServiceError
from ecoroute.domain.models import RouteCandidate
from ecoroute.infrastructure.logging import StructuredLogger, get_logger
from ecoroute.services.route_presenter import format_route_line
from ecoroute.services.route_service import RouteEstimator, build_route_estimator
from ecoroute.shared.exceptions import ConfigError, FixtureError


def _parse_args(argv: Optional[Sequence[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="ecoroute",
        description="Rank driving, cycling, transit and walking options by eco-score.",
    )
    parser.add_argument("from_address", help="Starting address")
    parser.add_argument("to_address", help="Destination address")
    parser.add_argument("--json", action="store_true", help="Print routes as JSON")
    parser.add_argument("--no-delay", action="store_true", help="Skip the simulated latency")
    parser.add_argument("--retries", type=int, default=0, help="Retries after a transient failure")
    parser.add_argument("--provider", choices=AVAILABLE_PROVIDERS, default=None, help="Route data source")
    parser.add_argument("--verbose", action="store_true", help="Emit structured logs on stderr")
    return parser.parse_args(argv)


async def _estimate_with_retries(
    estimator: RouteEstimator,
    from_address: str,
    to_address: str,
    retries: int,
    log: Optional[StructuredLogger] = None,
) -> list[RouteCandidate]:
    attempt = 0
    while True:
        try:
            return await estimator.estimate(from_address, to_address)
        except TransientServiceError as exc:
            if attempt >= retries:
                raise
            attempt += 1
            if log:
                log.warning("cli", exc.message, attempt=attempt, retries=retries)


def _render(from_address: str, to_address: str, routes: list[RouteCandidate]) -> str:
    lines = ["Best Route Options", f"From: {from_address} → To: {to_address}", "-" * 50]
    lines.extend(format_route_line(route) for route in routes)
    return "\n".join(lines)


def main(argv: Optional[Sequence[str]] = None) -> int:
    load_dotenv()
    args = _parse_args(argv)

    settings = load_settings()
    updates: dict = {}
    if args.provider:
        updates["provider"] = args.provider
    if args.no_delay:
        updates["delay_min_ms"] = 0
        updates["delay_max_ms"] = 0
    if updates:
        settings = settings.model_copy(update=updates)

    log = get_logger() if args.verbose else None
    if log:
        log.estimate_start("cli", provider=settings.provider)
    try:
        estimator = build_route_estimator(settings)
        routes = asyncio.run(
            _estimate_with_retries(estimator, args.from_address, args.to_address, max(0, args.retries), log)
        )
    except RouteEstimateError as exc:
        if log:
            log.error("cli", exc.message, code=exc.code)
        print(f"Error: {exc.message}", file=sys.stderr)
        return 1
    except (ConfigError, FixtureError) as exc:
        if log:
            log.error("cli", str(exc))
        print(f"Error: {exc}", file=sys.stderr)
        return 2
    if log:
        log.estimate_end("cli", routes_count=len(routes))

    if args.json:
        print(json.dumps([route.model_dump(mode="json") for route in routes], ensure_ascii=False, indent=2))
    else:
        print(_render(args.from_address.strip(), args.to_address.strip(), routes))
    return 0


if __name__ == "__main__":
    sys.exit(main())
