import asyncio
from collections.abc import Awaitable
from typing import TypeVar

T = TypeVar("T")


class DeadlineExceeded(Exception):
    """Raised when the timer finishes before the raced work."""


async def race_deadline(work: Awaitable[T], timeout_seconds: float) -> T:
    """Run ``work`` against a timer; whichever finishes first wins.

    The loser is cancelled. A blocking call wrapped in ``asyncio.to_thread``
    keeps running in its thread after cancellation; its result is dropped.
    If both finish in the same tick the work result is returned.
    """
    work_task = asyncio.ensure_future(work)
    timer_task = asyncio.ensure_future(asyncio.sleep(timeout_seconds))
    try:
        done, _ = await asyncio.wait(
            {work_task, timer_task},
            return_when=asyncio.FIRST_COMPLETED,
        )
    finally:
        for task in (work_task, timer_task):
            if not task.done():
                task.cancel()

    if work_task in done:
        return work_task.result()
    raise DeadlineExceeded(f"no result within {timeout_seconds:g}s")
