r"""Retry strategy for calculating backoff delays."""

from __future__ import annotations

__all__ = ["RetryStrategy"]

import logging
from typing import TYPE_CHECKING

from retryable.utils.sleep import to_milliseconds

if TYPE_CHECKING:
    from retryable.engine.policy import Policy

logger: logging.Logger = logging.getLogger(__name__)


class RetryStrategy:
    """Strategy for calculating sleep times between attempts.

    Args:
        policy: The resolved retry policy holding the ``sleep`` option.

    Example:
        ```pycon
        >>> from retryable.engine.policy import Policy
        >>> from retryable.engine.strategy import RetryStrategy
        >>> strategy = RetryStrategy(Policy(sleep=lambda n: n + 1))
        >>> strategy.calculate_delay(0)
        1000
        >>> strategy.calculate_delay(1)
        2000

        ```
    """

    def __init__(self, policy: Policy) -> None:
        self.policy = policy

    def calculate_delay(self, attempt: int) -> int:
        """Calculate the delay before the next attempt.

        Args:
            attempt: Current retry index (0-indexed).

        Returns:
            Sleep time in milliseconds.

        Raises:
            ValueError: If the computed delay is negative.
        """
        seconds = self.policy.sleep_for(attempt)
        milliseconds = to_milliseconds(seconds)
        logger.debug(f"Waiting {seconds}s ({milliseconds}ms) before retry {attempt + 1}")
        return milliseconds
