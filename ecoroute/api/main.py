"""FastAPI application exposing the route estimator."""

from __future__ import annotations

import logging
import os
from typing import Optional

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from ecoroute import __version__
from ecoroute.api.schemas import (
    ErrorResponse,
    HealthResponse,
    PreviewRequest,
    RouteRequest,
    RoutesResponse,
)
from ecoroute.domain.exceptions import (
    DuplicateAddressError,
    InvalidInputError,
    RouteEstimateError,
    TransientServiceError,
)
from ecoroute.infrastructure.logging import get_logger
from ecoroute.services.route_presenter import MapPreview, build_map_preview
from ecoroute.services.route_service import RouteEstimator, build_route_estimator

_api_logger = logging.getLogger("ecoroute.api")

load_dotenv()

app = FastAPI(
    title="ecoroute",
    version=__version__,
    docs_url="/docs" if os.getenv("ENABLE_DOCS", "false").lower() == "true" else None,
    redoc_url=None,
)

_STATUS_BY_ERROR: dict[type[RouteEstimateError], int] = {
    InvalidInputError: 400,
    DuplicateAddressError: 409,
    TransientServiceError: 503,
}


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        response = await call_next(request)
        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"
        response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"
        response.headers["Cache-Control"] = "no-store"
        return response


app.add_middleware(SecurityHeadersMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=os.getenv("CORS_ORIGINS", "*").split(","),
    allow_credentials=True,
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)

_estimator: Optional[RouteEstimator] = None


def _get_estimator() -> RouteEstimator:
    global _estimator
    if _estimator is None:
        _estimator = build_route_estimator()
    return _estimator


@app.exception_handler(RouteEstimateError)
async def _route_error_handler(_request: Request, exc: RouteEstimateError) -> JSONResponse:
    status = _STATUS_BY_ERROR.get(type(exc), 500)
    body = ErrorResponse(code=exc.code, message=exc.message)
    return JSONResponse(status_code=status, content=body.model_dump())


@app.get("/health", response_model=HealthResponse)
def health():
    return HealthResponse(status="ok")


@app.post("/routes", response_model=RoutesResponse)
async def routes(req: RouteRequest):
    """Top eco-scored route options between two addresses."""
    log = get_logger()
    log.estimate_start("routes")
    try:
        ranked = await _get_estimator().estimate(req.from_address, req.to_address)
    except RouteEstimateError as exc:
        log.error("routes", exc.message, code=exc.code)
        raise
    except Exception as exc:
        _api_logger.exception("routes endpoint error: %s", type(exc).__name__)
        log.error("routes", "internal error")
        return JSONResponse(
            status_code=500,
            content=ErrorResponse(code="INTERNAL", message="Route estimation failed, please retry later").model_dump(),
        )
    log.estimate_end("routes", routes_count=len(ranked))
    return RoutesResponse(
        from_address=req.from_address.strip(),
        to_address=req.to_address.strip(),
        routes=ranked,
        trace_id=log.trace_id,
    )


@app.post("/routes/preview", response_model=MapPreview)
def preview(req: PreviewRequest):
    return build_map_preview(
        req.route, req.from_address, req.to_address, region=req.region, map_type=req.map_type
    )
