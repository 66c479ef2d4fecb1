r"""Backoff strategies usable as the ``sleep`` option.

Each strategy is a callable taking the zero-based retry index and
returning the number of seconds to sleep, so an instance can be passed
directly as ``sleep``.
"""

from __future__ import annotations

__all__ = [
    "BaseBackoffStrategy",
    "ConstantBackoff",
    "ExponentialBackoff",
    "FibonacciBackoff",
    "LinearBackoff",
]

from retryable.backoff.base import BaseBackoffStrategy
from retryable.backoff.constant import ConstantBackoff
from retryable.backoff.exponential import ExponentialBackoff
from retryable.backoff.fibonacci import FibonacciBackoff
from retryable.backoff.linear import LinearBackoff
