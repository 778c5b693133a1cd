"""Core types, models, and reference parsing."""

from .exceptions import (
    CatalogUnavailable,
    FetchError,
    IecbibError,
    RequestError,
    WorkerPoolError,
)
from .models import (
    BibliographicDate,
    BibliographicItem,
    Contributor,
    Copyright,
    DocumentIdentifier,
    DocumentRelation,
    DocumentStatus,
    Organization,
    TypedTitle,
    TypedUri,
)
from .reference import CodeParser, ParsedCode, Reference, parse_reference
from .types import DateType, FetchState, RelationType, ResolutionStatus

__all__ = [
    # Types
    "DateType",
    "FetchState",
    "RelationType",
    "ResolutionStatus",
    # Models
    "BibliographicDate",
    "BibliographicItem",
    "Contributor",
    "Copyright",
    "DocumentIdentifier",
    "DocumentRelation",
    "DocumentStatus",
    "Organization",
    "TypedTitle",
    "TypedUri",
    # References
    "CodeParser",
    "ParsedCode",
    "Reference",
    "parse_reference",
    # Exceptions
    "CatalogUnavailable",
    "FetchError",
    "IecbibError",
    "RequestError",
    "WorkerPoolError",
]
