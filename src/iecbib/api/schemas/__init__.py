"""API schema definitions."""

from iecbib.api.schemas.base import APIBaseSchema
from iecbib.api.schemas.requests import ResolveReferenceRequest, SearchHitsRequest
from iecbib.api.schemas.responses import (
    HealthResponse,
    HitResponse,
    ResolveReferenceResponse,
    SearchHitsResponse,
)

__all__ = [
    # Base
    "APIBaseSchema",
    # Requests
    "ResolveReferenceRequest",
    "SearchHitsRequest",
    # Responses
    "HealthResponse",
    "HitResponse",
    "ResolveReferenceResponse",
    "SearchHitsResponse",
]
