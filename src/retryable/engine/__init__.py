r"""Retry engine.

Public API:
    - Policy: Resolved, immutable retry configuration
    - RetryDecider: Logic for deciding whether to retry
    - RetryStrategy: Strategy for calculating retry delays
    - RetryExecutor: Synchronous retry executor
    - AsyncRetryExecutor: Asynchronous retry executor
    - Success, Failure: Tagged outcomes of one attempt
"""

from __future__ import annotations

__all__ = [
    "AsyncRetryExecutor",
    "Failure",
    "Policy",
    "RetryDecider",
    "RetryExecutor",
    "RetryStrategy",
    "Success",
]

from retryable.engine.decider import RetryDecider
from retryable.engine.executor import RetryExecutor
from retryable.engine.executor_async import AsyncRetryExecutor
from retryable.engine.outcome import Failure, Success
from retryable.engine.policy import Policy
from retryable.engine.strategy import RetryStrategy
