"""
Tests for the blocking wrappers around async client methods.
"""

from __future__ import annotations

import asyncio

import pytest


class _Counter:
    def __init__(self) -> None:
        self.calls = 0

    async def bump_async(self, by: int = 1) -> int:
        """Increment and return the counter."""
        await asyncio.sleep(0)
        self.calls += by
        return self.calls


class TestRunSync:
    """Test run_sync."""

    def test_runs_without_loop(self):
        from evelib.core.sync import run_sync

        async def answer():
            return 42

        assert run_sync(answer()) == 42

    async def test_runs_inside_running_loop(self):
        """Inside a running loop the coroutine runs on a worker thread."""
        from evelib.core.sync import run_sync

        async def answer():
            return 42

        assert run_sync(answer()) == 42

    def test_exceptions_propagate(self):
        from evelib.core.errors import RequestError
        from evelib.core.sync import run_sync

        async def fail():
            raise RequestError("down")

        with pytest.raises(RequestError, match="down"):
            run_sync(fail())


class TestBlocking:
    """Test the blocking method factory."""

    def test_sync_variant_matches_async(self):
        from evelib.core.sync import blocking, run_sync

        class Counter(_Counter):
            bump = blocking(_Counter.bump_async)

        counter = Counter()

        assert counter.bump(by=2) == 2
        assert run_sync(counter.bump_async(by=3)) == 5
        assert counter.calls == 5

    def test_name_drops_async_suffix(self):
        from evelib.core.sync import blocking

        bump = blocking(_Counter.bump_async)

        assert bump.__name__ == "bump"
        assert bump.__qualname__ == "_Counter.bump"
        assert bump.__doc__ == "Increment and return the counter."
