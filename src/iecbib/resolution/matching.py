"""Candidate matching of catalog hits against a parsed reference."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from iecbib.core.reference import (
    CodeParser,
    ParsedCode,
    Reference,
    strip_packaged_part,
    strip_part,
)
from iecbib.resolution.hits import Hit

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MatchQuery:
    """What a candidate has to equal to match."""

    code: str
    year: str | None = None
    bundle: str | None = None
    corrigendum: str | None = None
    packaged: bool = False
    all_parts: bool = False

    @classmethod
    def from_reference(
        cls,
        reference: Reference,
        parser: CodeParser | None = None,
    ) -> MatchQuery:
        """
        Build the query from a reference.

        The code, bundle and corrigendum come from the reference code; the year
        is the requested one, falling back to a year embedded in the code.
        A reference carrying ``part`` is a packaged-part retry.
        """
        parsed = (parser or CodeParser()).parse_query(reference.code)
        if parsed is None:
            return cls(
                code=reference.code.strip().upper(),
                year=reference.year,
                packaged=reference.part is not None,
                all_parts=reference.all_parts,
            )

        return cls(
            code=parsed.code,
            year=reference.year or parsed.year,
            bundle=parsed.bundle,
            corrigendum=parsed.corrigendum,
            packaged=reference.part is not None,
            all_parts=reference.all_parts,
        )


class MatchFilter:
    """Selects the hits whose code matches the query, keeping search order."""

    def __init__(self, parser: CodeParser | None = None) -> None:
        self._parser = parser or CodeParser()

    def comparable_code(self, candidate: ParsedCode, query: MatchQuery) -> str:
        """
        The candidate's code after the query's stripping rules.

        Packaged-part stripping runs before all-parts stripping.
        """
        code = candidate.code
        if query.packaged:
            code = strip_packaged_part(code)
        if query.all_parts:
            code = strip_part(code)
        return code

    def matches(self, hit_code: str, query: MatchQuery) -> bool:
        """Whether a single hit code satisfies the query."""
        candidate = self._parser.parse_candidate(hit_code)
        if candidate is None:
            return False

        return (
            self.comparable_code(candidate, query) == query.code
            and (query.year is None or query.year == candidate.year)
            and query.bundle == candidate.bundle
            and query.corrigendum == candidate.corrigendum
        )

    def select(self, hits: Iterable[Hit], query: MatchQuery) -> list[Hit]:
        """Ordered subsequence of ``hits`` that match ``query``."""
        selected = [hit for hit in hits if self.matches(hit.code, query)]
        logger.debug(f"{len(selected)} hits match {query.code!r}")
        return selected
