"""Health check endpoints."""

from __future__ import annotations

from typing import Literal

from fastapi import APIRouter, Request

from iecbib.api.dependencies import Settings
from iecbib.api.schemas import HealthResponse

router = APIRouter(tags=["health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    operation_id="getHealth",
    summary="Health check",
    description="Check the health status of the API.",
)
async def health_check(request: Request, settings: Settings) -> HealthResponse:
    """Check API health status."""
    from iecbib import __version__

    services: dict[str, Literal["up", "down", "unknown"]] = {}
    client = getattr(request.app.state, "iecbib_client", None)
    services["resolver"] = "up" if client is not None else "down"

    return HealthResponse(
        status="healthy" if client is not None else "unhealthy",
        version=__version__,
        catalog_url=settings.catalog_url,
        services=services,
    )


@router.get(
    "/ready",
    operation_id="getReady",
    summary="Readiness check",
    description="Check if the API is ready to serve traffic.",
)
async def readiness_check(request: Request) -> dict[str, bool]:
    """Check if API is ready to serve traffic."""
    return {"ready": getattr(request.app.state, "iecbib_client", None) is not None}
