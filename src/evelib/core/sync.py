"""
Blocking wrappers for the async client API.

Every network operation is written once as a coroutine. The synchronous
name is generated from it, so both variants share one code path:

    class Map:
        async def get_jumps_async(self) -> Jumps: ...
        get_jumps = blocking(get_jumps_async)
"""

import asyncio
import functools
from collections.abc import Awaitable, Callable, Coroutine
from concurrent.futures import ThreadPoolExecutor
from typing import Any, TypeVar

T = TypeVar("T")


def run_sync(coro: Coroutine[Any, Any, T]) -> T:
    """
    Run a coroutine to completion and return its result.

    Uses asyncio.run() when the calling thread has no running event loop.
    Inside a running loop (e.g. a notebook), the coroutine is run on a fresh
    loop in a worker thread so the caller's loop is not re-entered.
    """
    try:
        asyncio.get_running_loop()
    except RuntimeError:
        return asyncio.run(coro)

    with ThreadPoolExecutor(max_workers=1) as pool:
        return pool.submit(asyncio.run, coro).result()


def blocking(func: Callable[..., Awaitable[T]]) -> Callable[..., T]:
    """Build the synchronous variant of an async method."""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> T:
        return run_sync(func(*args, **kwargs))

    name = func.__name__.removesuffix("_async")
    wrapper.__name__ = name
    wrapper.__qualname__ = func.__qualname__.removesuffix("_async")
    return wrapper
