from __future__ import annotations

import asyncio
import logging
from typing import Awaitable, Callable, Sequence, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


async def first_success(strategies: Sequence[tuple[str, Callable[[], Awaitable[T | None]]]]) -> T | None:
    """Run strategies in order and return the first non-empty result.

    A strategy that raises or returns something falsy is skipped; the next
    one only starts after the previous one has finished.
    """
    for name, attempt in strategies:
        try:
            result = await attempt()
        except Exception as exc:
            logger.warning("Strategy %s failed: %s", name, exc)
            continue
        if result:
            logger.info("Strategy %s succeeded", name)
            return result
        logger.debug("Strategy %s returned nothing", name)
    return None


async def settle_all(
    awaitables: Sequence[Awaitable[T]],
    on_error: Callable[[int, BaseException], T],
) -> list[T]:
    """Await every task and replace each failure with ``on_error(index, exc)``.

    Results keep input order; one failing task never cancels the others.
    """
    outcomes = await asyncio.gather(*awaitables, return_exceptions=True)
    results: list[T] = []
    for index, outcome in enumerate(outcomes):
        if isinstance(outcome, BaseException):
            results.append(on_error(index, outcome))
        else:
            results.append(outcome)
    return results
