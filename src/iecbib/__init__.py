"""iecbib - Resolve IEC standard references against the IEC webstore."""

from iecbib.client import IecbibClient, get
from iecbib.config import IecbibSettings
from iecbib.core.exceptions import CatalogUnavailable, FetchError, IecbibError, RequestError
from iecbib.core.models import BibliographicItem
from iecbib.core.reference import Reference, parse_reference
from iecbib.resolution.hits import Hit, HitCollection
from iecbib.resolution.resolver import Resolver

__version__ = "0.1.0"
__all__ = [
    # Client
    "IecbibClient",
    "IecbibSettings",
    "get",
    # Resolution
    "Hit",
    "HitCollection",
    "Resolver",
    # Models
    "BibliographicItem",
    "Reference",
    "parse_reference",
    # Errors
    "CatalogUnavailable",
    "FetchError",
    "IecbibError",
    "RequestError",
    # Version
    "__version__",
]
