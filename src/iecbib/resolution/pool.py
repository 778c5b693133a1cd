"""Bounded worker pool with order-preserving results."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Generic, TypeVar

from iecbib.core.exceptions import WorkerPoolError

logger = logging.getLogger(__name__)

PayloadT = TypeVar("PayloadT")
ResultT = TypeVar("ResultT")


@dataclass(frozen=True)
class WorkUnit(Generic[PayloadT]):
    """A submitted payload and its submission index."""

    index: int
    payload: PayloadT


@dataclass(frozen=True)
class WorkResult(Generic[ResultT]):
    """The value produced for the unit submitted at ``index``."""

    index: int
    value: ResultT


_STOP = object()


class WorkerPool(Generic[PayloadT, ResultT]):
    """
    Runs a registered coroutine function over submitted payloads with a fixed
    number of concurrent workers.

    Results come back in submission order no matter which unit finishes first.
    A failing unit does not cancel its siblings: every unit drains, then
    :meth:`await_all` raises :class:`WorkerPoolError` with all failures.

    Usage:
        pool = WorkerPool(3)
        pool.register(hit_fetcher)
        for hit in hits:
            await pool.submit(hit)
        items = await pool.await_all()
    """

    def __init__(self, width: int, *, max_pending: int | None = None) -> None:
        """
        Args:
            width: Number of concurrent workers
            max_pending: Queued units before :meth:`submit` waits (defaults to ``width``)
        """
        if width < 1:
            raise ValueError(f"Worker pool width must be positive, got {width}")

        self.width = width
        self._queue: asyncio.Queue[WorkUnit[PayloadT] | object] = asyncio.Queue(
            maxsize=max_pending or width
        )
        self._results: asyncio.Queue[WorkResult[ResultT]] = asyncio.Queue()
        self._failures: list[tuple[int, BaseException]] = []
        self._func: Callable[[PayloadT], Awaitable[ResultT]] | None = None
        self._workers: list[asyncio.Task[None]] = []
        self._submitted = 0
        self._closed = False

    def register(self, func: Callable[[PayloadT], Awaitable[ResultT]]) -> None:
        """Register the unit of work. Must be called exactly once, before submitting."""
        if self._func is not None:
            raise RuntimeError("Worker function already registered")
        self._func = func

    async def submit(self, payload: PayloadT) -> None:
        """Queue a payload, waiting while the pending queue is full."""
        if self._func is None:
            raise RuntimeError("Register a worker function before submitting")
        if self._closed:
            raise RuntimeError("Worker pool is closed")

        if not self._workers:
            self._start()

        unit = WorkUnit(index=self._submitted, payload=payload)
        self._submitted += 1
        await self._queue.put(unit)

    async def close(self) -> None:
        """Signal that no further payloads will be submitted."""
        if self._closed:
            return
        self._closed = True
        if self._workers:
            for _ in self._workers:
                await self._queue.put(_STOP)

    async def await_all(self) -> list[ResultT]:
        """
        Wait for every submitted unit and return the results in submission order.

        Raises:
            WorkerPoolError: If any unit failed, after all units have completed
        """
        await self.close()
        if self._workers:
            await asyncio.gather(*self._workers)

        results: list[WorkResult[ResultT]] = []
        while not self._results.empty():
            results.append(self._results.get_nowait())

        if self._failures:
            failures = sorted(self._failures, key=lambda f: f[0])
            index, first = failures[0]
            raise WorkerPoolError(
                f"{len(failures)} of {self._submitted} units failed; "
                f"first failure at index {index}: {first}",
                failures=failures,
            ) from first

        results.sort(key=lambda r: r.index)
        return [r.value for r in results]

    def _start(self) -> None:
        self._workers = [
            asyncio.create_task(self._work(), name=f"worker-pool-{i}")
            for i in range(self.width)
        ]

    async def _work(self) -> None:
        func = self._func
        if func is None:
            raise RuntimeError("Worker started without a registered function")

        while True:
            unit = await self._queue.get()
            # _STOP ends the worker
            if not isinstance(unit, WorkUnit):
                return

            try:
                value = await func(unit.payload)
            except Exception as e:
                logger.debug(f"Unit {unit.index} failed: {e}")
                self._failures.append((unit.index, e))
            else:
                await self._results.put(WorkResult(index=unit.index, value=value))
