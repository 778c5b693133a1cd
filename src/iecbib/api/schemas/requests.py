"""Request schemas for API endpoints."""

from __future__ import annotations

from typing import Annotated

from pydantic import Field

from iecbib.api.schemas.base import APIBaseSchema


class ResolveReferenceRequest(APIBaseSchema):
    """Request to resolve an IEC reference."""

    code: Annotated[
        str,
        Field(
            min_length=1,
            max_length=200,
            description="Reference code, e.g. 'IEC 60950-1:2005' or 'IEC 61000 (all parts)'.",
        ),
    ]

    year: Annotated[
        str | None,
        Field(
            default=None,
            pattern=r"^\d{4}$",
            description="Publication year. Overrides a year embedded in the code.",
        ),
    ]

    all_parts: Annotated[
        bool,
        Field(
            default=False,
            description="Cite all parts of the document.",
        ),
    ]

    keep_year: Annotated[
        bool,
        Field(
            default=False,
            description="Keep the dated reference when no year is requested.",
        ),
    ]


class SearchHitsRequest(APIBaseSchema):
    """Request for a raw webstore search."""

    text: Annotated[
        str,
        Field(
            min_length=1,
            max_length=200,
            description="Reference number to search for.",
        ),
    ]

    year: Annotated[
        str | None,
        Field(
            default=None,
            pattern=r"^\d{4}$",
            description="Limit results to documents published in this year.",
        ),
    ]

    part: Annotated[
        str | None,
        Field(
            default=None,
            max_length=20,
            description="Part number when searching for a packaged standard.",
        ),
    ]
