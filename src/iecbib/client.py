"""Main library client for standalone usage."""

from __future__ import annotations

import logging
import re
from typing import Any, ClassVar

from iecbib.catalog.client import CatalogClient
from iecbib.config import IecbibSettings
from iecbib.core.models import BibliographicItem
from iecbib.resolution.hits import HitCollection
from iecbib.resolution.resolver import Catalog, Resolver

logger = logging.getLogger(__name__)


class IecbibClient:
    """
    Main client for the iecbib library.

    Resolves IEC references against the IEC webstore and announces which
    references it handles, so it can be plugged into a multi-publisher
    bibliography registry.

    Usage:
        async with IecbibClient() as client:
            # Latest edition, undated
            item = await client.get("IEC 60950-1")

            # A specific edition
            item = await client.get("IEC 60950-1", "2005")

            # All parts of a multi-part standard
            item = await client.get("IEC 61000 (all parts)")

    Settings are loaded from environment variables or can be passed explicitly.
    """

    SHORT: ClassVar[str] = "iecbib"
    PREFIX: ClassVar[str] = "IEC"
    DEFAULT_PREFIX: ClassVar[re.Pattern[str]] = re.compile(r"^IEC\s|^IEV($|\s)")
    ID_TYPE: ClassVar[str] = "IEC"

    def __init__(
        self,
        settings: IecbibSettings | None = None,
        *,
        catalog: Catalog | None = None,
    ) -> None:
        """
        Initialize the client.

        Args:
            settings: Application settings. If not provided, loaded from environment.
            catalog: Catalog to search instead of the IEC webstore
        """
        self._settings = settings or IecbibSettings()
        self._custom_catalog = catalog
        self._catalog: CatalogClient | None = None
        self._resolver: Resolver | None = None

    async def __aenter__(self) -> IecbibClient:
        """Initialize resources on context entry."""
        await self.open()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Clean up resources on context exit."""
        await self.close()

    async def open(self) -> None:
        """Create the catalog client and resolver; use when not entering as a context manager."""
        self._initialize()

    def _initialize(self) -> None:
        if self._custom_catalog is not None:
            self._resolver = Resolver(self._custom_catalog)
            return

        self._catalog = CatalogClient(self._settings)
        self._resolver = Resolver(self._catalog)
        logger.debug(f"Catalog client initialized for {self._catalog.base_url}")

    async def close(self) -> None:
        """Close all resources."""
        if self._catalog:
            await self._catalog.close()
            self._catalog = None
        self._resolver = None

    def _ensure_initialized(self) -> Resolver:
        if self._resolver is None:
            raise RuntimeError(
                "Client not initialized. Use 'async with IecbibClient() as client:'"
            )
        return self._resolver

    def handles(self, code: str) -> bool:
        """Whether ``code`` is an IEC reference (``IEC ...`` or ``IEV``)."""
        return self.DEFAULT_PREFIX.match(code.strip()) is not None

    async def get(
        self,
        code: str,
        year: str | None = None,
        *,
        all_parts: bool = False,
        keep_year: bool = False,
    ) -> BibliographicItem | None:
        """
        Resolve a reference to a bibliographic item.

        Args:
            code: IEC reference, optionally with ``:year`` or `` (all parts)``
            year: Publication year
            all_parts: Cite all parts of the document
            keep_year: Keep the dated reference when no year was requested

        Returns:
            The item, or None if no match was found
        """
        resolver = self._ensure_initialized()
        return await resolver.get(code, year, all_parts=all_parts, keep_year=keep_year)

    async def search(
        self,
        text: str,
        year: str | None = None,
        part: str | None = None,
    ) -> HitCollection:
        """Search the webstore without matching or fetching."""
        resolver = self._ensure_initialized()
        return await resolver.search(text, year, part)

    @staticmethod
    def from_dict(data: dict[str, Any]) -> BibliographicItem:
        """Rebuild an item from its dict representation."""
        return BibliographicItem.from_dict(data)


# Convenience function for one-off resolutions
async def get(
    code: str,
    year: str | None = None,
    *,
    all_parts: bool = False,
    keep_year: bool = False,
    settings: IecbibSettings | None = None,
) -> BibliographicItem | None:
    """
    Resolve a reference (convenience function).

    For multiple resolutions, use IecbibClient to reuse the HTTP connections.
    """
    async with IecbibClient(settings) as client:
        return await client.get(code, year, all_parts=all_parts, keep_year=keep_year)
