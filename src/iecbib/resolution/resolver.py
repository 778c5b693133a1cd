"""Top-level resolution of IEC references to bibliographic items."""

from __future__ import annotations

import dataclasses
import logging
import re
from typing import Protocol

from iecbib.core.models import BibliographicItem
from iecbib.core.reference import (
    CodeParser,
    Reference,
    extract_part,
    packaged_base_code,
    parse_reference,
)
from iecbib.resolution.hits import Hit, HitCollection
from iecbib.resolution.matching import MatchFilter, MatchQuery
from iecbib.resolution.reconciler import FetchReconciler
from iecbib.resolution.vocabulary import iev, is_vocabulary

logger = logging.getLogger(__name__)


class Catalog(Protocol):
    """The search side of the remote catalog."""

    async def search(
        self,
        code: str,
        year: str | None = None,
        part: str | None = None,
    ) -> HitCollection: ...


class Resolver:
    """
    Resolves references such as ``IEC 60950-1:2013`` or ``IEC 61000 (all parts)``.

    Resolution steps:
    - IEV short-circuits to the vocabulary record
    - search the catalog and keep the hits matching code/year/bundle/amendment
    - if nothing matches a dashed code, retry as a part of a packaged standard
    - fetch the matches three at a time and take the first with the right year
    - collapse to the most recent or all-parts reference as requested
    """

    def __init__(
        self,
        catalog: Catalog,
        *,
        match_filter: MatchFilter | None = None,
        reconciler: FetchReconciler | None = None,
    ) -> None:
        self._catalog = catalog
        self._parser = CodeParser()
        self._filter = match_filter or MatchFilter(self._parser)
        self._reconciler = reconciler or FetchReconciler()

    async def search(
        self,
        text: str,
        year: str | None = None,
        part: str | None = None,
    ) -> HitCollection:
        """
        Search the catalog without any filtering.

        Pass ``part`` to search for a packaged standard, e.g.
        ``search("IEC 60050-3", None, "311")``.

        Raises:
            CatalogUnavailable: If the webstore cannot be reached
        """
        return await self._catalog.search(text, year.strip() if year else None, part)

    async def get(
        self,
        code: str,
        year: str | None = None,
        *,
        all_parts: bool = False,
        keep_year: bool = False,
    ) -> BibliographicItem | None:
        """
        Resolve a reference to a single bibliographic item.

        Args:
            code: Reference such as ``IEC 60050-311``, ``IEC 61000:2005`` or
                ``IEC 61000 (all parts)``
            year: Publication year; overrides a year embedded in ``code``
            all_parts: Cite all parts of the document
            keep_year: Keep the year on an undated request instead of
                collapsing to the most recent reference

        Returns:
            The item, or None if nothing matched (the reasons are logged)

        Raises:
            CatalogUnavailable: If the webstore cannot be reached
            FetchError: If fetching a candidate's details failed
        """
        reference = parse_reference(code, year)
        if is_vocabulary(reference.code):
            return iev()

        if all_parts and not reference.all_parts:
            reference = reference.model_copy(update={"all_parts": True})

        item = await self._get_one(reference)
        if item is None:
            return None

        if not reference.year and not keep_year:
            item = item.to_most_recent_reference()
        if reference.all_parts:
            item = item.to_all_parts()
        return item

    async def _get_one(self, reference: Reference) -> BibliographicItem | None:
        matched, query = await self.search_filter(reference)
        result = await self._reconciler.reconcile(matched, query.year)

        if result.found and result.item is not None:
            logger.info(f'("{reference.code}") found {result.item.primary_id}')
            return result.item

        self._report_missing(reference.code, query.year, result.missed_years)
        return None

    async def search_filter(self, reference: Reference) -> tuple[list[Hit], MatchQuery]:
        """
        Search for ``reference`` and keep the matching hits, retrying as a
        packaged standard when a dashed code finds nothing.

        Returns:
            The matching hits in search order and the query they matched
        """
        query = MatchQuery.from_reference(reference, self._parser)
        logger.info(f'("{reference.id}") fetching...')

        hits = await self.search(query.code, query.year)
        matched = self._filter.select(hits, query)

        if not matched and (part := extract_part(query.code)):
            base_code = packaged_base_code(query.code)
            logger.info(f'("{reference.id}") trying part {part} of {base_code}...')
            query = dataclasses.replace(query, code=base_code, packaged=True)
            hits = await self.search(base_code, query.year, part)
            matched = self._filter.select(hits, query)

        return matched, query

    @staticmethod
    def _report_missing(code: str, year: str | None, missed_years: list[int]) -> None:
        ref_id = f"{code}:{year}" if year else code
        logger.warning(
            f"No match found online for {ref_id}. "
            "The code must be exactly like it is on the standards website."
        )
        if missed_years:
            years = ", ".join(str(y) for y in missed_years)
            logger.warning(
                f"(There was no match for {year}, though there were matches found for {years}.)"
            )
        if re.search(r"\d-\d", code):
            logger.warning(
                "The provided document part may not exist, or the document "
                "may no longer be published in parts."
            )
        else:
            logger.warning(
                "If you wanted to cite all document parts for the reference, use "
                f'"{code} (all parts)". If the document is not a standard, use its '
                "document type abbreviation (TS, TR, PAS, Guide)."
            )
