"""Tests for the order-preserving worker pool."""

from __future__ import annotations

import asyncio
import random

import pytest

from iecbib.core.exceptions import WorkerPoolError
from iecbib.resolution.pool import WorkerPool

# ============================================================================
# Ordering and Concurrency Tests
# ============================================================================


class TestWorkerPoolResults:
    """Tests for result ordering and the concurrency bound."""

    async def test_results_in_submission_order(self):
        """Results are ordered by submission even when completion order differs."""
        delays = [random.uniform(0, 0.02) for _ in range(12)]

        async def work(i: int) -> int:
            await asyncio.sleep(delays[i])
            return i * 10

        pool: WorkerPool[int, int] = WorkerPool(3)
        pool.register(work)
        for i in range(12):
            await pool.submit(i)

        assert await pool.await_all() == [i * 10 for i in range(12)]

    async def test_reverse_completion_order(self):
        completed: list[str] = []

        async def work(code: str) -> str:
            await asyncio.sleep({"a": 0.03, "b": 0.02, "c": 0.0}[code])
            completed.append(code)
            return code.upper()

        pool: WorkerPool[str, str] = WorkerPool(3)
        pool.register(work)
        for code in "abc":
            await pool.submit(code)

        assert await pool.await_all() == ["A", "B", "C"]
        assert completed == ["c", "b", "a"]

    async def test_never_exceeds_width(self):
        running = 0
        peak = 0

        async def work(i: int) -> int:
            nonlocal running, peak
            running += 1
            peak = max(peak, running)
            await asyncio.sleep(0.005)
            running -= 1
            return i

        pool: WorkerPool[int, int] = WorkerPool(3)
        pool.register(work)
        for i in range(10):
            await pool.submit(i)
        await pool.await_all()

        assert 1 <= peak <= 3

    async def test_width_one_is_sequential(self):
        order: list[int] = []

        async def work(i: int) -> int:
            order.append(i)
            await asyncio.sleep(0)
            return i

        pool: WorkerPool[int, int] = WorkerPool(1)
        pool.register(work)
        for i in range(5):
            await pool.submit(i)

        assert await pool.await_all() == [0, 1, 2, 3, 4]
        assert order == [0, 1, 2, 3, 4]

    async def test_empty_pool(self):
        async def work(i: int) -> int:
            return i

        pool: WorkerPool[int, int] = WorkerPool(3)
        pool.register(work)
        assert await pool.await_all() == []


# ============================================================================
# Failure Tests
# ============================================================================


class TestWorkerPoolFailures:
    """Tests for failure reporting."""

    async def test_failure_is_reported_after_all_units_finish(self):
        finished: list[int] = []

        async def work(i: int) -> int:
            await asyncio.sleep(0.01 if i != 1 else 0)
            if i == 1:
                raise ValueError("boom")
            finished.append(i)
            return i

        pool: WorkerPool[int, int] = WorkerPool(3)
        pool.register(work)
        for i in range(4):
            await pool.submit(i)

        with pytest.raises(WorkerPoolError) as exc_info:
            await pool.await_all()

        assert sorted(finished) == [0, 2, 3]
        assert [index for index, _ in exc_info.value.failures] == [1]
        assert isinstance(exc_info.value.__cause__, ValueError)

    async def test_all_failures_sorted_by_index(self):
        async def work(i: int) -> int:
            await asyncio.sleep(0.01 * (5 - i))
            if i % 2:
                raise RuntimeError(f"unit {i}")
            return i

        pool: WorkerPool[int, int] = WorkerPool(2)
        pool.register(work)
        for i in range(5):
            await pool.submit(i)

        with pytest.raises(WorkerPoolError) as exc_info:
            await pool.await_all()

        assert [index for index, _ in exc_info.value.failures] == [1, 3]
        assert "2 of 5 units failed" in exc_info.value.message


# ============================================================================
# Lifecycle Tests
# ============================================================================


class TestWorkerPoolLifecycle:
    """Tests for registration and submission rules."""

    def test_width_must_be_positive(self):
        with pytest.raises(ValueError):
            WorkerPool(0)

    def test_register_twice(self):
        async def work(i: int) -> int:
            return i

        pool: WorkerPool[int, int] = WorkerPool(1)
        pool.register(work)
        with pytest.raises(RuntimeError):
            pool.register(work)

    async def test_submit_before_register(self):
        pool: WorkerPool[int, int] = WorkerPool(1)
        with pytest.raises(RuntimeError):
            await pool.submit(1)

    async def test_submit_after_close(self):
        async def work(i: int) -> int:
            return i

        pool: WorkerPool[int, int] = WorkerPool(1)
        pool.register(work)
        await pool.submit(1)
        assert await pool.await_all() == [1]

        with pytest.raises(RuntimeError):
            await pool.submit(2)

    async def test_worker_without_function_fails(self):
        """Workers started before registration stop with an error."""
        pool: WorkerPool[int, int] = WorkerPool(1)
        pool._start()

        with pytest.raises(RuntimeError, match="registered function"):
            await pool.await_all()
