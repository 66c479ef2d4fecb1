r"""Synchronous retry executor.

This module provides the RetryExecutor class that runs a unit of work
under a resolved ``Policy``, retrying matching failures with backoff and
running the ``after`` hook exactly once.
"""

from __future__ import annotations

__all__ = ["RetryExecutor"]

import logging
from typing import TYPE_CHECKING, TypeVar

from retryable.engine.decider import RetryDecider
from retryable.engine.outcome import Failure, capture
from retryable.engine.strategy import RetryStrategy
from retryable.utils.sleep import sleep_milliseconds

if TYPE_CHECKING:
    from collections.abc import Callable

    from retryable.engine.policy import Policy

T = TypeVar("T")

logger: logging.Logger = logging.getLogger(__name__)


class RetryExecutor:
    """Executes a unit of work with automatic retry logic.

    The executor orchestrates the following components:
    - RetryDecider: Determines whether to retry based on the outcome
    - RetryStrategy: Calculates backoff delays between attempts
    - the sleep service: Blocks for the computed delay

    Args:
        policy: The resolved retry policy.
        sleep: Sleep service receiving milliseconds. Defaults to a
            ``time.sleep`` based service.

    Attributes:
        policy: The resolved retry policy.
        decider: Logic for deciding whether to retry.
        strategy: Strategy for calculating retry delays.
        sleep: The sleep service.

    Example:
        ```pycon
        >>> from retryable.engine import Policy, RetryExecutor
        >>> calls = []
        >>> def work():
        ...     calls.append(1)
        ...     if len(calls) < 3:
        ...         raise ConnectionError("reset")
        ...     return "done"
        ...
        >>> executor = RetryExecutor(Policy(tries=3, sleep=0), sleep=lambda ms: None)
        >>> executor.execute(work)
        'done'
        >>> len(calls)
        3

        ```
    """

    def __init__(
        self,
        policy: Policy,
        sleep: Callable[[int], object] | None = None,
    ) -> None:
        self.policy = policy
        self.decider: RetryDecider = RetryDecider(policy)
        self.strategy: RetryStrategy = RetryStrategy(policy)
        self.sleep = sleep if sleep is not None else sleep_milliseconds

    def execute(self, work: Callable[[], T]) -> T:
        """Run ``work`` until it succeeds, exhausts its tries, or fails
        with a non-matching exception.

        Returned values are final unless the policy has an error
        predicate and the predicate is true for the value. When tries are
        exhausted on such a value, the value itself is returned.

        Raised exceptions are retried only when their kind and message
        match the policy. Any other exception, or the last one once tries
        are exhausted, is re-raised unchanged.

        The ``after`` hook runs exactly once, when the whole sequence has
        finished, whether it returned or raised.

        Args:
            work: Zero-argument callable to run.

        Returns:
            The value returned by the last attempt.

        Raises:
            Exception: The exception raised by the last attempt, if it
                was not retried.
        """
        try:
            return self._run(work)
        finally:
            self.policy.after()

    def _run(self, work: Callable[[], T]) -> T:
        max_attempts = self.policy.max_attempts
        attempt = 0
        while True:
            outcome = capture(work)
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
            self.sleep(self.strategy.calculate_delay(attempt))
            attempt += 1
