r"""Retry decision logic.

This module provides the RetryDecider class that encapsulates the logic
for deciding whether an attempt should be retried, based on the raised
exception or the returned value, and on the remaining attempts.
"""

from __future__ import annotations

__all__ = ["RetryDecider"]

import logging
from typing import TYPE_CHECKING, Any

from retryable.engine.matchers import kind_matches, message_matches

if TYPE_CHECKING:
    from retryable.engine.policy import Policy

logger: logging.Logger = logging.getLogger(__name__)


class RetryDecider:
    """Decides whether an attempt should be retried.

    Args:
        policy: The resolved retry policy.

    Example:
        ```pycon
        >>> from retryable.engine.decider import RetryDecider
        >>> from retryable.engine.policy import Policy
        >>> decider = RetryDecider(Policy(tries=2, on=(TimeoutError,)))
        >>> decider.should_retry_exception(TimeoutError("slow"), attempt=0)
        (True, 'TimeoutError')
        >>> decider.should_retry_exception(KeyError("k"), attempt=0)
        (False, 'exception kind KeyError not retryable')
        >>> decider.should_retry_exception(TimeoutError("slow"), attempt=2)
        (False, 'max tries exhausted')

        ```
    """

    def __init__(self, policy: Policy) -> None:
        self.policy = policy

    def is_exhausted(self, attempt: int) -> bool:
        return attempt == self.policy.tries

    def should_retry_exception(self, error: Exception, attempt: int) -> tuple[bool, str]:
        """Determine if a raised exception should trigger a retry.

        The checks run in order: exhaustion, exception kind, then
        exception message.

        Args:
            error: The exception raised by the work.
            attempt: Current retry index (0-indexed).

        Returns:
            Tuple of (should_retry, reason).
        """
        if self.is_exhausted(attempt):
            return (False, "max tries exhausted")
        if not kind_matches(error, self.policy.on):
            return (False, f"exception kind {type(error).__name__} not retryable")
        if not message_matches(str(error), self.policy.message):
            return (False, f"exception message {str(error)!r} not retryable")
        return (True, type(error).__name__)

    def should_retry_value(self, value: Any, attempt: int) -> tuple[bool, str]:
        """Determine if a returned value should trigger a retry.

        Args:
            value: The value returned by the work.
            attempt: Current retry index (0-indexed).

        Returns:
            Tuple of (should_retry, reason).
        """
        predicate = self.policy.error_predicate
        if predicate is None or not predicate(value):
            return (False, "success")
        if self.is_exhausted(attempt):
            return (False, "max tries exhausted")
        return (True, "error value")
