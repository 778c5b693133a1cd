"""FastAPI dependency injection."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request

from iecbib.client import IecbibClient
from iecbib.config import IecbibSettings, get_settings


async def get_iecbib_client(request: Request) -> IecbibClient:
    """Get the library client from app state."""
    return request.app.state.iecbib_client


# Type aliases for cleaner dependency injection
Settings = Annotated[IecbibSettings, Depends(get_settings)]
Client = Annotated[IecbibClient, Depends(get_iecbib_client)]
