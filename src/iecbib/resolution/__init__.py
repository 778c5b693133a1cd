"""Resolution engine: hits, matching, pooled fetching and orchestration."""

from iecbib.resolution.hits import Hit, HitCollection
from iecbib.resolution.matching import MatchFilter, MatchQuery
from iecbib.resolution.pool import WorkerPool, WorkResult, WorkUnit
from iecbib.resolution.reconciler import FETCH_BATCH_SIZE, FetchReconciler, ReconcileResult
from iecbib.resolution.resolver import Catalog, Resolver
from iecbib.resolution.vocabulary import iev

__all__ = [
    # Hits
    "Hit",
    "HitCollection",
    # Matching
    "MatchFilter",
    "MatchQuery",
    # Pool
    "WorkerPool",
    "WorkResult",
    "WorkUnit",
    # Reconciling
    "FETCH_BATCH_SIZE",
    "FetchReconciler",
    "ReconcileResult",
    # Resolver
    "Catalog",
    "Resolver",
    "iev",
]
