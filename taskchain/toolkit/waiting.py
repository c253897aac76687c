from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

from taskchain.config import config
from taskchain.errors import WaitTimeout

if TYPE_CHECKING:
    from collections.abc import Callable

__all__ = ["wait"]

logger = logging.getLogger(__name__)


async def wait(
    cond: Callable[[], object],
    timeout: int | float | None = None,
    interval: int | float | None = None,
) -> None:
    """
    Polls `cond` every `interval` seconds until it returns a truthy value.

    The condition is checked for the first time after one interval. A
    `timeout` of 0 means to wait forever, otherwise `WaitTimeout` is raised
    once `timeout` seconds worth of intervals have elapsed.

    When `timeout` or `interval` is omitted, the value from `config.wait` is
    used instead.
    """
    if timeout is None:
        timeout = config.wait.timeout.total_seconds()
    if interval is None:
        interval = config.wait.interval.total_seconds()

    if interval <= 0:
        raise ValueError("interval must be positive")
    if timeout < 0:
        raise ValueError("timeout must not be negative")

    counter = 0
    while True:
        await asyncio.sleep(interval)
        if cond():
            return
        counter += 1
        if timeout > 0 and counter * interval >= timeout:
            logger.debug("Condition not met within %ss", timeout)
            raise WaitTimeout("timeout reached")
