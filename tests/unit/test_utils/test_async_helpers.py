"""
Tests for Async Helpers
"""

import asyncio

import pytest

from quizgrader.utils.async_helpers import call_maybe_async, gather_settled


class TestGatherSettled:
    """Test cases for gather_settled."""

    @pytest.mark.asyncio
    async def test_collects_values_in_task_order(self):
        async def make(value, delay):
            await asyncio.sleep(delay)
            return value

        tasks = [lambda: make("a", 0.02), lambda: make("b", 0.0), lambda: make("c", 0.01)]

        settled = await gather_settled(tasks)

        assert [s.value for s in settled] == ["a", "b", "c"]
        assert all(s.ok for s in settled)

    @pytest.mark.asyncio
    async def test_failures_do_not_stop_other_tasks(self):
        completed = []

        async def ok(name):
            await asyncio.sleep(0.01)
            completed.append(name)
            return name

        async def boom():
            raise ValueError("disk full")

        settled = await gather_settled([lambda: ok("first"), boom, lambda: ok("last")])

        assert sorted(completed) == ["first", "last"]
        assert settled[0].ok and settled[2].ok
        assert isinstance(settled[1].error, ValueError)

    @pytest.mark.asyncio
    async def test_respects_concurrency_limit(self):
        running = 0
        peak = 0

        async def task():
            nonlocal running, peak
            running += 1
            peak = max(peak, running)
            await asyncio.sleep(0.01)
            running -= 1

        await gather_settled([task for _ in range(10)], max_concurrent=3)

        assert peak == 3

    @pytest.mark.asyncio
    async def test_empty(self):
        assert await gather_settled([]) == []


class TestCallMaybeAsync:

    @pytest.mark.asyncio
    async def test_coroutine_function(self):
        async def double(x):
            return x * 2

        assert await call_maybe_async(double, 4) == 8

    @pytest.mark.asyncio
    async def test_plain_function_runs_in_thread(self):
        assert await call_maybe_async(sorted, [3, 1, 2]) == [1, 2, 3]

    @pytest.mark.asyncio
    async def test_plain_function_errors_propagate(self):
        def fail():
            raise KeyError("q1")

        with pytest.raises(KeyError):
            await call_maybe_async(fail)
