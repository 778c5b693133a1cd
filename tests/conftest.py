"""Shared test fixtures for all tests."""

from __future__ import annotations

import asyncio
from datetime import date

import pytest

from iecbib.config import IecbibSettings
from iecbib.core.exceptions import CatalogUnavailable
from iecbib.core.models import (
    IEC_ORGANIZATION,
    BibliographicDate,
    BibliographicItem,
    Contributor,
    DocumentIdentifier,
    TypedTitle,
    TypedUri,
)
from iecbib.core.types import DateType
from iecbib.resolution.hits import Hit, HitCollection

# ============================================================================
# Item Builders
# ============================================================================


def make_item(code: str, *years: int | str, title: str = "Sample standard") -> BibliographicItem:
    """Create an item whose published dates are ``years``."""
    return BibliographicItem(
        fetched=date(2024, 1, 15),
        titles=[TypedTitle(content=title, type="main")],
        links=[TypedUri(type="src", content=f"https://webstore.iec.ch/publication/{code}")],
        docidentifier=[DocumentIdentifier(id=code)],
        dates=[BibliographicDate(type=DateType.PUBLISHED, on=str(y)) for y in years],
        contributors=[Contributor(role="publisher", organization=IEC_ORGANIZATION)],
        language=["en"],
        script=["Latn"],
    )


# ============================================================================
# Catalog Double
# ============================================================================


class FakeCatalog:
    """
    In-memory catalog.

    ``pages`` maps a searched code to its hit codes; ``items`` maps a hit code
    to the item its detail fetch returns. ``delays`` (seconds) control the
    fetch completion order, ``failing`` lists hit codes whose fetch raises.
    """

    def __init__(
        self,
        pages: dict[str, list[str]] | None = None,
        items: dict[str, BibliographicItem] | None = None,
        *,
        delays: dict[str, float] | None = None,
        failing: set[str] | None = None,
        unavailable: bool = False,
    ) -> None:
        self.pages = pages or {}
        self.items = items or {}
        self.delays = delays or {}
        self.failing = failing or set()
        self.unavailable = unavailable
        self.searches: list[tuple[str, str | None, str | None]] = []
        self.fetches: list[str] = []
        self.completed: list[str] = []

    async def search(
        self,
        code: str,
        year: str | None = None,
        part: str | None = None,
    ) -> HitCollection:
        self.searches.append((code, year, part))
        if self.unavailable:
            raise CatalogUnavailable("Could not access https://webstore.iec.ch", url="https://webstore.iec.ch")

        rows = [
            {"code": c, "title": f"Title of {c}", "url": f"https://webstore.iec.ch/publication/{i}"}
            for i, c in enumerate(self.pages.get(code, []))
        ]
        return HitCollection.from_rows(rows, code, year, part, source=self)

    async def fetch(self, hit: Hit) -> BibliographicItem:
        self.fetches.append(hit.code)
        await asyncio.sleep(self.delays.get(hit.code, 0))
        if hit.code in self.failing:
            raise CatalogUnavailable("Could not access https://webstore.iec.ch", url=hit.url)
        self.completed.append(hit.code)
        return self.items.get(hit.code) or make_item(hit.code)


# ============================================================================
# Settings Fixtures
# ============================================================================


@pytest.fixture
def mock_settings() -> IecbibSettings:
    """Create settings for testing."""
    return IecbibSettings(
        catalog_url="https://webstore.iec.ch",
        timeout=5.0,
        max_connections=3,
        user_agent="iecbib-tests",
        debug=True,
        log_level="DEBUG",
    )


# ============================================================================
# Sample Data Fixtures
# ============================================================================


@pytest.fixture
def sample_item() -> BibliographicItem:
    """A dated single-part item."""
    return BibliographicItem(
        fetched=date(2024, 1, 15),
        titles=[
            TypedTitle(content="Information technology equipment", type="title-intro"),
            TypedTitle(content="Safety", type="title-main"),
            TypedTitle(content="Part 1: General requirements", type="title-part"),
            TypedTitle(
                content="Information technology equipment - Safety - Part 1: General requirements",
                type="main",
            ),
        ],
        links=[TypedUri(type="src", content="https://webstore.iec.ch/publication/4024")],
        docidentifier=[DocumentIdentifier(id="IEC 60950-1:2005")],
        dates=[BibliographicDate(type=DateType.PUBLISHED, on="2005-12-08")],
        contributors=[Contributor(role="publisher", organization=IEC_ORGANIZATION)],
        edition="2.0",
        language=["en", "fr"],
        script=["Latn"],
        abstract="Applicable to mains-powered information technology equipment.",
    )


@pytest.fixture
def fake_catalog() -> FakeCatalog:
    """An empty catalog; tests fill ``pages`` and ``items``."""
    return FakeCatalog()


@pytest.fixture
def catalog_factory() -> type[FakeCatalog]:
    """The FakeCatalog class, for tests that need pages, delays or failures."""
    return FakeCatalog


@pytest.fixture
def item_factory():
    """Factory fixture building items with the given published years."""
    return make_item
