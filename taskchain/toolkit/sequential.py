from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable, Iterable
from typing import TypeAlias, TypeVar

__all__ = [
    "TaskFactories",
    "TaskFactory",
    "sequentialize",
]

logger = logging.getLogger(__name__)

T = TypeVar("T")

TaskFactory: TypeAlias = Callable[[], Awaitable[T]]
TaskFactories: TypeAlias = Iterable[TaskFactory[T]]


async def sequentialize(factories: TaskFactories[T]) -> list[T]:
    """
    Run task factories one after another and return their results in order.

    Each factory is called only after the awaitable of the previous one has
    completed. The first exception stops the chain and is re-raised as is,
    the remaining factories are never called.
    """
    tasks = list(factories)
    results: list[T] = []
    for idx, factory in enumerate(tasks, start=1):
        try:
            result = await factory()
        except Exception:
            logger.debug("Task %d of %d failed, skipping the rest", idx, len(tasks))
            raise
        results.append(result)
    return results
