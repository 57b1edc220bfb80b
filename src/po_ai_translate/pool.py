"""A bounded-concurrency runner for async work items."""

import asyncio
import logging
from collections.abc import Awaitable, Callable, Sequence
from typing import TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")
R = TypeVar("R")


async def run_bounded(limit: int, items: Sequence[T], worker: Callable[[T], Awaitable[R]]) -> list[R]:
    """
    Run `worker` over `items` with at most `limit` calls in flight.

    A slot picks up the next item as soon as its current call finishes. After
    the first failure no further item is started; calls already in flight are
    allowed to finish, then the first exception is raised. Running calls are
    never cancelled.

    Args:
        limit: The maximum number of concurrent calls.
        items: The work items, processed in order.
        worker: The coroutine function applied to each item.

    Returns:
        The results, in the order of `items`.

    Raises:
        ValueError: If `limit` is less than 1.

    """
    if limit < 1:
        msg = f"Concurrency limit must be at least 1, got {limit}"
        raise ValueError(msg)

    results: list[R | None] = [None] * len(items)
    pending = iter(enumerate(items))
    errors: list[BaseException] = []

    async def _slot() -> None:
        # All slots share one iterator, so each item is taken exactly once.
        for index, item in pending:
            if errors:
                return
            try:
                results[index] = await worker(item)
            except Exception as e:  # noqa: BLE001
                if errors:
                    logger.debug("Dropping additional failure after the first: %s", e)
                errors.append(e)
                return

    await asyncio.gather(*(_slot() for _ in range(min(limit, len(items)))))

    if errors:
        raise errors[0]
    return results  # type: ignore[return-value]
