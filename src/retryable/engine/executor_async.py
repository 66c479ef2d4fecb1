r"""Asynchronous retry executor.

This module provides the AsyncRetryExecutor class, the ``asyncio``
counterpart of RetryExecutor. Decisions and their ordering are the same;
only the work and the sleep service are awaited.
"""

from __future__ import annotations

__all__ = ["AsyncRetryExecutor"]

import logging
from typing import TYPE_CHECKING, TypeVar

from retryable.engine.decider import RetryDecider
from retryable.engine.outcome import Failure, capture_async
from retryable.engine.strategy import RetryStrategy
from retryable.utils.sleep import asleep_milliseconds

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from retryable.engine.policy import Policy

T = TypeVar("T")

logger: logging.Logger = logging.getLogger(__name__)


class AsyncRetryExecutor:
    """Executes an async unit of work with automatic retry logic.

    Args:
        policy: The resolved retry policy.
        sleep: Async sleep service receiving milliseconds. Defaults to an
            ``asyncio.sleep`` based service, so other tasks keep running
            during retry waits.

    Example:
        ```pycon
        >>> import asyncio
        >>> from retryable.engine import AsyncRetryExecutor, Policy
        >>> async def work():
        ...     return "done"
        ...
        >>> asyncio.run(AsyncRetryExecutor(Policy()).execute(work))
        'done'

        ```
    """

    def __init__(
        self,
        policy: Policy,
        sleep: Callable[[int], Awaitable[object]] | None = None,
    ) -> None:
        self.policy = policy
        self.decider: RetryDecider = RetryDecider(policy)
        self.strategy: RetryStrategy = RetryStrategy(policy)
        self.sleep = sleep if sleep is not None else asleep_milliseconds

    async def execute(self, work: Callable[[], Awaitable[T]]) -> T:
        """Await ``work()`` with retries; see ``RetryExecutor.execute``.

        Note:
            The ``after`` hook is a plain synchronous callable here too.
        """
        try:
            return await self._run(work)
        finally:
            self.policy.after()

    async def _run(self, work: Callable[[], Awaitable[T]]) -> T:
        max_attempts = self.policy.max_attempts
        attempt = 0
        while True:
            outcome = await capture_async(work)
            if isinstance(outcome, Failure):
                should_retry, reason = self.decider.should_retry_exception(outcome.error, attempt)
                if not should_retry:
                    logger.debug(
                        f"Not retrying after attempt {attempt + 1}/{max_attempts}: {reason}"
                    )
                    raise outcome.error
            else:
                should_retry, reason = self.decider.should_retry_value(outcome.value, attempt)
                if not should_retry:
                    if reason != "success":
                        logger.debug(
                            f"Returning error value after attempt {attempt + 1}/{max_attempts}: "
                            f"{reason}"
                        )
                    return outcome.value

            logger.debug(f"Retrying after attempt {attempt + 1}/{max_attempts} ({reason})")
            await self.sleep(self.strategy.calculate_delay(attempt))
            attempt += 1
