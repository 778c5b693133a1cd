"""Response schemas for API endpoints."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import Field

from iecbib.api.schemas.base import APIBaseSchema
from iecbib.core.types import ResolutionStatus


class HealthResponse(APIBaseSchema):
    """Health check response."""

    status: Literal["healthy", "degraded", "unhealthy"]
    version: str
    catalog_url: str = Field(..., description="IEC webstore the resolver searches")
    services: dict[str, Literal["up", "down", "unknown"]] = Field(default_factory=dict)


class ResolveReferenceResponse(APIBaseSchema):
    """Result of resolving a reference."""

    code: str
    year: str | None = None
    status: ResolutionStatus
    item: dict[str, Any] | None = Field(default=None, description="The resolved bibliographic item")
    total_duration_ms: float


class HitResponse(APIBaseSchema):
    """A single webstore search hit."""

    code: str
    title: str
    url: str


class SearchHitsResponse(APIBaseSchema):
    """Hits returned by a webstore search."""

    text: str
    year: str | None = None
    part: str | None = None
    hits: list[HitResponse] = Field(default_factory=list)
