"""Reference resolution and search endpoints."""

from __future__ import annotations

import time

from fastapi import APIRouter, HTTPException

from iecbib.api.dependencies import Client
from iecbib.api.schemas import (
    HitResponse,
    ResolveReferenceRequest,
    ResolveReferenceResponse,
    SearchHitsRequest,
    SearchHitsResponse,
)
from iecbib.core.exceptions import CatalogUnavailable, FetchError
from iecbib.core.types import ResolutionStatus

router = APIRouter(prefix="/references", tags=["references"])


@router.post(
    "/resolve",
    response_model=ResolveReferenceResponse,
    operation_id="resolveReference",
    summary="Resolve an IEC reference",
    description="Resolve an IEC reference to a bibliographic item from the IEC webstore.",
)
async def resolve_reference(
    request: ResolveReferenceRequest,
    client: Client,
) -> ResolveReferenceResponse:
    """Resolve a reference; a missing match is a 200 with status not_found."""
    start_time = time.monotonic()

    try:
        item = await client.get(
            request.code,
            request.year,
            all_parts=request.all_parts,
            keep_year=request.keep_year,
        )
    except CatalogUnavailable as e:
        raise HTTPException(status_code=503, detail=e.message) from e
    except FetchError as e:
        raise HTTPException(status_code=502, detail=e.message) from e

    return ResolveReferenceResponse(
        code=request.code,
        year=request.year,
        status=ResolutionStatus.FOUND if item else ResolutionStatus.NOT_FOUND,
        item=item.to_dict() if item else None,
        total_duration_ms=(time.monotonic() - start_time) * 1000,
    )


@router.post(
    "/search",
    response_model=SearchHitsResponse,
    operation_id="searchHits",
    summary="Search the IEC webstore",
    description="Return the raw webstore hits for a reference number, without matching.",
)
async def search_hits(
    request: SearchHitsRequest,
    client: Client,
) -> SearchHitsResponse:
    """Search the webstore."""
    try:
        hits = await client.search(request.text, request.year, request.part)
    except CatalogUnavailable as e:
        raise HTTPException(status_code=503, detail=e.message) from e

    return SearchHitsResponse(
        text=hits.text,
        year=hits.year,
        part=hits.part,
        hits=[HitResponse(code=h.code, title=h.title, url=h.url) for h in hits],
    )
