"""Bounded retry for calls to hosted services."""

import asyncio
import logging
from collections.abc import Awaitable, Callable
from typing import TypeVar

from fridge_chef.domain.errors import UpstreamUnavailable

_logger = logging.getLogger(__name__)

T = TypeVar("T")


async def call_with_retry(
    func: Callable[[], Awaitable[T]],
    *,
    action: str,
    attempts: int,
    delay_seconds: float,
) -> T:
    """Call an async function, retrying transient upstream failures with backoff.

    Only ``UpstreamUnavailable`` is retried; ``attempts`` is the number of
    extra tries after the first call.
    """
    attempt = 0
    while True:
        try:
            return await func()
        except UpstreamUnavailable as exc:
            attempt += 1
            _logger.warning(
                "%s failed (attempt %s/%s, status=%s): %s",
                action,
                attempt,
                attempts + 1,
                exc.status_code if exc.status_code is not None else "n/a",
                exc,
            )
            if attempt > attempts:
                raise
            await asyncio.sleep(delay_seconds * 2 ** (attempt - 1))
