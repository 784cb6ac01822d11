"""
Stage cancellation.

Wraps each embedding/storage await so a caller timeout or cancel event
stops the in-flight call and surfaces as raglab CancelledError. Task
cancellation from outside still propagates as asyncio.CancelledError.

Dependencies: asyncio
System role: Cancellation and timeout handling for engine stages
"""

import asyncio
import logging
from typing import Awaitable, TypeVar

from raglab.core.exceptions import CancelledError

logger = logging.getLogger(__name__)

T = TypeVar("T")


async def _cancel_and_wait(task: asyncio.Future) -> None:
    task.cancel()
    await asyncio.gather(task, return_exceptions=True)


async def run_stage(
    awaitable: Awaitable[T],
    stage: str,
    timeout: float | None = None,
    cancel_event: asyncio.Event | None = None,
) -> T:
    """
    Await one stage call under a timeout and/or cancel event.

    Args:
        awaitable: Stage call (adapter.embed(...), store.put(...), ...)
        stage: Stage name recorded on CancelledError
        timeout: Seconds before the call is cancelled (None = unbounded)
        cancel_event: Event whose setting cancels the call

    Returns:
        Result of the awaitable

    Raises:
        CancelledError: Timeout elapsed or cancel_event set first
        asyncio.CancelledError: The calling task was cancelled
    """
    if cancel_event is not None and cancel_event.is_set():
        if asyncio.iscoroutine(awaitable):
            awaitable.close()
        raise CancelledError(f"Stage '{stage}' cancelled before start", stage=stage)

    if timeout is None and cancel_event is None:
        return await awaitable

    task = asyncio.ensure_future(awaitable)
    waiter = asyncio.ensure_future(cancel_event.wait()) if cancel_event is not None else None
    pending = {task} if waiter is None else {task, waiter}

    try:
        done, _ = await asyncio.wait(pending, timeout=timeout, return_when=asyncio.FIRST_COMPLETED)
    except asyncio.CancelledError:
        await _cancel_and_wait(task)
        raise
    finally:
        if waiter is not None:
            waiter.cancel()

    if task in done:
        return task.result()

    await _cancel_and_wait(task)
    if cancel_event is not None and cancel_event.is_set():
        logger.warning(f"{__name__}:run_stage - Stage '{stage}' cancelled by caller")
        raise CancelledError(f"Stage '{stage}' cancelled", stage=stage)

    logger.warning(f"{__name__}:run_stage - Stage '{stage}' timed out after {timeout}s")
    raise CancelledError(
        f"Stage '{stage}' timed out after {timeout}s",
        stage=stage,
        details={"timeout_seconds": timeout},
    )
