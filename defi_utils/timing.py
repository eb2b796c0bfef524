"""Delay, retry and debounce helpers for asyncio code."""

import asyncio
import functools
import inspect
from typing import Any, Awaitable, Callable, Optional, Set, TypeVar, Union

from defi_utils.log import get_logger

logger = get_logger(__name__)

T = TypeVar("T")


async def delay(ms: float) -> None:
    """Sleep for ms milliseconds."""
    await asyncio.sleep(ms / 1000)


async def retry_with_backoff(
    fn: Callable[[], Union[T, Awaitable[T]]],
    max_retries: int = 3,
    base_delay: float = 1000,
    sleep: Callable[[float], Awaitable[None]] = delay,
) -> T:
    """Call fn until it succeeds, backing off exponentially between attempts.

    fn is called at most max_retries + 1 times. Attempt i (from 0) that
    fails is followed by a wait of base_delay * 2**i milliseconds. When the
    last attempt fails its exception is re-raised unchanged.

    Args:
        fn: Zero-argument callable, sync or returning an awaitable
        max_retries: Retries after the first attempt
        base_delay: Initial wait in milliseconds
        sleep: Awaitable sleep taking milliseconds (replaceable in tests)

    Returns:
        The first successful result of fn
    """
    for attempt in range(max_retries + 1):
        try:
            result = fn()
            if inspect.isawaitable(result):
                result = await result
            return result
        except Exception as e:
            if attempt == max_retries:
                logger.error(f"Giving up after {attempt + 1} attempts: {e}")
                raise

            delay_ms = base_delay * 2 ** attempt
            logger.warning(
                f"Attempt {attempt + 1}/{max_retries + 1} failed: {e}. "
                f"Retrying in {delay_ms}ms..."
            )
            await sleep(delay_ms)


def debounce(func: Callable[..., Any], wait: float) -> Callable[..., None]:
    """Collapse rapid calls into one trailing call of func.

    Every call cancels the pending one and schedules func with the latest
    arguments wait milliseconds later. The wrapper must be called from
    inside a running event loop. Coroutine functions are run as tasks.

    Args:
        func: Callable to debounce
        wait: Quiet period in milliseconds

    Returns:
        Debounced wrapper
    """
    handle: Optional[asyncio.TimerHandle] = None
    tasks: Set[asyncio.Future] = set()

    def run_later(args: tuple, kwargs: dict) -> None:
        nonlocal handle
        handle = None
        result = func(*args, **kwargs)
        if inspect.isawaitable(result):
            task = asyncio.ensure_future(result)
            tasks.add(task)
            task.add_done_callback(tasks.discard)

    @functools.wraps(func)
    def debounced(*args: Any, **kwargs: Any) -> None:
        nonlocal handle
        if handle is not None:
            handle.cancel()
        loop = asyncio.get_running_loop()
        handle = loop.call_later(wait / 1000, run_later, args, kwargs)

    return debounced
