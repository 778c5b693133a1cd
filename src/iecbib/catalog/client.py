"""Async HTTP client for the IEC webstore search and document pages."""

from __future__ import annotations

import logging
import re
import time
from contextlib import asynccontextmanager
from datetime import date
from typing import TYPE_CHECKING, AsyncIterator, ClassVar

import httpx

from iecbib.catalog.scraper import parse_detail_page, parse_results_page
from iecbib.config import IecbibSettings
from iecbib.core.exceptions import CatalogUnavailable
from iecbib.resolution.hits import HitCollection

if TYPE_CHECKING:
    from iecbib.core.models import BibliographicItem
    from iecbib.resolution.hits import Hit

logger = logging.getLogger(__name__)

YEAR_PATTERN = re.compile(r"\d{4}")


class CatalogClient:
    """
    Client for the IEC webstore.

    Provides:
    - one results-page search per :meth:`search` call
    - document page fetches for individual hits
    - translation of every transport or HTTP failure into CatalogUnavailable

    Usage:
        async with CatalogClient() as catalog:
            hits = await catalog.search("IEC 60950-1", "2005")
            item = await catalog.fetch(hits[0])
    """

    BASE_URL: ClassVar[str] = "https://webstore.iec.ch"
    SEARCH_PATH: ClassVar[str] = "/searchkey"

    def __init__(self, settings: IecbibSettings | None = None) -> None:
        self.settings = settings or IecbibSettings()
        self._client: httpx.AsyncClient | None = None

    @property
    def base_url(self) -> str:
        return (self.settings.catalog_url or self.BASE_URL).rstrip("/")

    @asynccontextmanager
    async def _get_client(self) -> AsyncIterator[httpx.AsyncClient]:
        """Get or create HTTP client with proper lifecycle."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=httpx.Timeout(self.settings.timeout),
                limits=httpx.Limits(max_connections=self.settings.max_connections),
                headers=self._get_default_headers(),
                follow_redirects=True,
            )

        try:
            yield self._client
        except httpx.HTTPStatusError as e:
            raise CatalogUnavailable(
                message=f"Could not access {self.base_url}",
                url=str(e.request.url),
                status_code=e.response.status_code,
            ) from e
        except httpx.HTTPError as e:
            raise CatalogUnavailable(
                message=f"Could not access {self.base_url}",
                url=self.base_url,
                details={"error": str(e), "error_type": type(e).__name__},
            ) from e

    def _get_default_headers(self) -> dict[str, str]:
        return {
            "User-Agent": self.settings.user_agent,
            "Accept": "text/html",
        }

    @staticmethod
    def build_search_params(code: str, year: str | None = None) -> dict[str, str]:
        """
        Query parameters for a search, covering the whole year when given.

        A year that is not a valid 4-digit year sends no date range.

        Examples:
            >>> CatalogClient.build_search_params("IEC 61000", "2005")
            {'RefNbr': 'IEC 61000', 'From': '2005-01-01', 'To': '2005-12-31', 'start': '1'}
        """
        start = end = ""
        if year and YEAR_PATTERN.fullmatch(year) and int(year) >= date.min.year:
            first = date(int(year), 1, 1)
            start = first.isoformat()
            end = first.replace(month=12, day=31).isoformat()
        return {"RefNbr": code, "From": start, "To": end, "start": "1"}

    async def search(
        self,
        code: str,
        year: str | None = None,
        part: str | None = None,
    ) -> HitCollection:
        """
        Search the webstore for ``code``, optionally limited to ``year``.

        ``part`` is recorded on the collection for packaged-standard searches.

        Raises:
            CatalogUnavailable: On any transport or HTTP error
        """
        params = self.build_search_params(code, year)
        start = time.monotonic()

        async with self._get_client() as client:
            response = await client.get(self.SEARCH_PATH, params=params)
            response.raise_for_status()

        rows = parse_results_page(response.text, self.base_url)
        duration_ms = (time.monotonic() - start) * 1000
        logger.debug(f"Search {code!r} ({year or 'any year'}): {len(rows)} hits in {duration_ms:.0f}ms")

        return HitCollection.from_rows(rows, code, year, part, source=self)

    async def fetch(self, hit: Hit) -> BibliographicItem:
        """
        Fetch and scrape a hit's document page.

        Raises:
            CatalogUnavailable: On any transport or HTTP error
        """
        async with self._get_client() as client:
            response = await client.get(hit.url)
            response.raise_for_status()

        return parse_detail_page(response.text, hit)

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> CatalogClient:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
