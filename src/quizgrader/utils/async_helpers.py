"""
Async Utility Functions

Helpers for fanning out independent operations and collecting every
outcome, successful or not.
"""

import asyncio
import inspect
from dataclasses import dataclass
from typing import Callable, Any, Optional, List, Awaitable

from .logging import get_logger

logger = get_logger(__name__)


@dataclass
class Settled:
    """Outcome of one task joined by :func:`gather_settled`."""
    value: Any = None
    error: Optional[BaseException] = None

    @property
    def ok(self) -> bool:
        return self.error is None


async def call_maybe_async(func: Callable, *args, **kwargs) -> Any:
    """
    Invoke ``func`` without blocking the event loop.

    Coroutine functions are awaited directly; plain callables run in a
    worker thread.
    """
    if inspect.iscoroutinefunction(func):
        return await func(*args, **kwargs)

    result = await asyncio.to_thread(func, *args, **kwargs)
    if inspect.isawaitable(result):
        return await result
    return result


async def gather_settled(tasks: List[Callable[[], Awaitable[Any]]],
                         max_concurrent: int = 5) -> List[Settled]:
    """
    Execute task factories with limited concurrency and wait for all of them.

    Unlike a plain ``asyncio.gather`` a failing task never short-circuits the
    others: every task runs to completion and its result or exception is
    reported in a :class:`Settled` at the same index as the task.

    Args:
        tasks: Zero-argument callables returning awaitables
        max_concurrent: Maximum concurrent executions

    Returns:
        One Settled per task, in task order
    """
    if not tasks:
        return []

    semaphore = asyncio.Semaphore(max_concurrent)

    async def execute_task(task: Callable[[], Awaitable[Any]]) -> Any:
        async with semaphore:
            return await task()

    outcomes = await asyncio.gather(*[execute_task(task) for task in tasks],
                                    return_exceptions=True)

    settled = []
    for outcome in outcomes:
        if isinstance(outcome, Exception):
            settled.append(Settled(error=outcome))
        elif isinstance(outcome, BaseException):
            # Cancellation and interpreter exits are not task failures
            raise outcome
        else:
            settled.append(Settled(value=outcome))

    failed = sum(1 for s in settled if not s.ok)
    if failed:
        logger.debug(f"{failed} of {len(settled)} tasks failed")

    return settled
