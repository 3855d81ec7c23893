"""Concurrent fan-out of per-row update calls."""

import asyncio
from collections.abc import Awaitable, Callable, Sequence
from typing import Any

from loguru import logger

from .errors import BulkSaveError

UpdateFn = Callable[[str, dict[str, Any]], Awaitable[Any]]


async def dispatch_updates(
    updates: Sequence[tuple[str, dict[str, Any]]], send: UpdateFn
) -> list[Any]:
    """Send every update at once and wait for all of them.

    There is no concurrency limit, ordering or cancellation: a failing call
    never stops the others from being sent. When any call fails, a single
    ``BulkSaveError`` is raised from the first failure in ``updates`` order.
    """
    if not updates:
        return []

    results = await asyncio.gather(
        *(send(entity_id, payload) for entity_id, payload in updates),
        return_exceptions=True,
    )

    failures = [
        (entity_id, result)
        for (entity_id, _payload), result in zip(updates, results, strict=True)
        if isinstance(result, BaseException)
    ]
    if failures:
        for entity_id, error in failures:
            logger.error("Update of {} failed: {}", entity_id, error)
        raise BulkSaveError([entity_id for entity_id, _ in failures], len(updates)) from failures[0][1]

    logger.info("Saved {} update(s)", len(updates))
    return list(results)
