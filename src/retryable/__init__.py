r"""retryable - Retry code with simple, intuitive options.

This package re-invokes a zero-argument callable until it succeeds, runs
out of tries, or fails in a way the options do not cover. It is meant for
wrapping flaky operations such as network calls or external APIs.

Key Features:
    - Retry on specific exception classes and/or exception messages
      (substrings or compiled regular expressions)
    - Retry on returned error values (``"error"`` or ``("error", ...)``)
      or on a custom predicate over returned values
    - Constant sleep or a sleep function of the retry index, with ready
      made linear, exponential and Fibonacci backoff helpers
    - An ``after`` hook run exactly once per call
    - Default and named configurations through a configuration provider
    - Sync, async and decorator entry points

Example:
    ```pycon
    >>> from retryable import configure, retryable
    >>> retryable({"on": TimeoutError, "tries": 5, "sleep": 2}, lambda: "called")
    'called'
    >>> configure("aws", message=["timeout", "throttl"], tries=5, sleep=2)
    >>> retryable("aws", lambda: "called")
    'called'

    ```
"""

from __future__ import annotations

__all__ = [
    "ERROR",
    "AsyncRetryExecutor",
    "ConfigProvider",
    "ConfigurationError",
    "DictConfigProvider",
    "Policy",
    "RetryExecutor",
    "RetryableError",
    "__version__",
    "configure",
    "get_default_provider",
    "resolve_policy",
    "retry",
    "retryable",
    "retryable_async",
    "set_default_provider",
]

from importlib.metadata import PackageNotFoundError, version

from retryable.call import retryable
from retryable.call_async import retryable_async
from retryable.config import (
    ConfigProvider,
    DictConfigProvider,
    configure,
    get_default_provider,
    set_default_provider,
)
from retryable.core.config import ERROR
from retryable.decorator import retry
from retryable.engine import AsyncRetryExecutor, Policy, RetryExecutor
from retryable.exceptions import ConfigurationError, RetryableError
from retryable.options import resolve_policy

try:
    __version__ = version(__name__)
except PackageNotFoundError:  # pragma: no cover
    # Package is not installed, fallback if needed
    __version__ = "0.0.0"
