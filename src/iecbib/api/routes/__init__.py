"""API route modules."""

from iecbib.api.routes.health import router as health_router
from iecbib.api.routes.references import router as references_router

__all__ = [
    "health_router",
    "references_router",
]
