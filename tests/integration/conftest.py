"""Integration test fixtures for the HTTP API."""

from __future__ import annotations

from typing import AsyncIterator

import pytest
from httpx import ASGITransport, AsyncClient

from iecbib.client import IecbibClient
from iecbib.config import IecbibSettings

# ============================================================================
# Catalog Fixtures
# ============================================================================


@pytest.fixture
def api_catalog(catalog_factory, item_factory):
    """In-memory webstore with IEC 60950-1 and the IEC 61000 series."""
    return catalog_factory(
        pages={
            "IEC 60950-1": ["IEC 60950-1:2013", "IEC 60950-1:2005"],
            "IEC 61000": ["IEC 61000-1:2005", "IEC 61000-2:2008"],
        },
        items={
            "IEC 60950-1:2013": item_factory("IEC 60950-1:2013", 2013, title="Safety"),
            "IEC 60950-1:2005": item_factory("IEC 60950-1:2005", 2005, title="Safety"),
            "IEC 61000-1:2005": item_factory("IEC 61000-1:2005", 2005, title="EMC"),
        },
    )


# ============================================================================
# FastAPI Test Client Fixtures
# ============================================================================


@pytest.fixture
async def test_app(mock_settings: IecbibSettings, api_catalog):
    """Create test FastAPI application backed by the in-memory catalog."""
    from iecbib.api.app import create_app
    from iecbib.api.dependencies import get_iecbib_client
    from iecbib.config import get_settings

    app = create_app()

    client = IecbibClient(mock_settings, catalog=api_catalog)
    await client.open()
    app.state.iecbib_client = client

    async def override_iecbib_client():
        return client

    app.dependency_overrides[get_settings] = lambda: mock_settings
    app.dependency_overrides[get_iecbib_client] = override_iecbib_client

    yield app

    # Cleanup
    app.dependency_overrides.clear()
    await client.close()


@pytest.fixture
async def test_client(test_app) -> AsyncIterator[AsyncClient]:
    """Create async HTTP test client."""
    transport = ASGITransport(app=test_app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
