"""Batch fetching of matched hits and published-year selection."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field

from iecbib.core.exceptions import FetchError, WorkerPoolError
from iecbib.core.models import BibliographicItem
from iecbib.core.types import FetchState
from iecbib.resolution.hits import Hit
from iecbib.resolution.pool import WorkerPool

logger = logging.getLogger(__name__)

# The webstore only allows 3 concurrent connections
FETCH_BATCH_SIZE = 3


@dataclass
class ReconcileResult:
    """Outcome of scanning the matched hits."""

    state: FetchState = FetchState.PENDING
    item: BibliographicItem | None = None
    hit: Hit | None = None
    missed_years: list[int] = field(default_factory=list)

    @property
    def found(self) -> bool:
        return self.state == FetchState.FOUND


class FetchReconciler:
    """
    Fetches matched hits in sequential batches and returns the first one whose
    published year is the requested year (or simply the first one if no year
    was requested).

    Years seen on candidates before the match are kept for error reporting.
    """

    def __init__(self, batch_size: int = FETCH_BATCH_SIZE) -> None:
        self.batch_size = batch_size

    async def reconcile(self, hits: Sequence[Hit], year: str | None) -> ReconcileResult:
        """
        Scan ``hits`` in order.

        Raises:
            FetchError: If any fetch in a batch failed
        """
        result = ReconcileResult()
        wanted = int(year) if year and year.isdigit() else None

        for start in range(0, len(hits), self.batch_size):
            result.state = FetchState.SCANNING
            batch = hits[start : start + self.batch_size]
            items = await self._fetch_batch(batch)

            for hit, item in zip(batch, items):
                if year is None:
                    return self._found(result, hit, item)

                for published in item.published_years():
                    if published == wanted:
                        return self._found(result, hit, item)
                    result.missed_years.append(published)

        result.state = FetchState.EXHAUSTED
        return result

    @staticmethod
    def _found(result: ReconcileResult, hit: Hit, item: BibliographicItem) -> ReconcileResult:
        result.state = FetchState.FOUND
        result.hit = hit
        result.item = item
        return result

    async def _fetch_batch(self, batch: Sequence[Hit]) -> list[BibliographicItem]:
        pool: WorkerPool[Hit, BibliographicItem] = WorkerPool(self.batch_size)
        pool.register(Hit.fetch)
        for hit in batch:
            await pool.submit(hit)

        try:
            return await pool.await_all()
        except WorkerPoolError as e:
            codes = [batch[index].code for index, _ in e.failures]
            logger.error(f"Failed to fetch {', '.join(codes)}: {e.message}")
            raise FetchError(
                f"Could not fetch {', '.join(codes)}",
                codes=codes,
                details={"failures": [str(exc) for _, exc in e.failures]},
            ) from e
