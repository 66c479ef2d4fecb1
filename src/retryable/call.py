r"""Implement the ``retryable`` entry point.

This module provides ``retryable``, which resolves the retry options
into a ``Policy`` and runs a zero-argument callable under it.
"""

from __future__ import annotations

__all__ = ["retryable"]

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, TypeVar

from retryable.engine.executor import RetryExecutor
from retryable.options import resolve_policy

if TYPE_CHECKING:
    from collections.abc import Callable

    from retryable.config import ConfigProvider

T = TypeVar("T")


def split_arguments(options_or_name: Any, work: Any) -> tuple[Any, Any]:
    """Support the single-argument form ``retryable(work)``."""
    if work is None:
        if callable(options_or_name) and not isinstance(options_or_name, (str, Mapping)):
            return None, options_or_name
        msg = "retryable() requires a zero-argument callable to run"
        raise TypeError(msg)
    return options_or_name, work


def retryable(
    options_or_name: str | Mapping[str, Any] | Callable[[], T] | None = None,
    work: Callable[[], T] | None = None,
    *,
    provider: ConfigProvider | None = None,
    sleeper: Callable[[int], object] | None = None,
    **options: Any,
) -> T:
    """Maybe retry some code.

    The return value is that of the last invocation of ``work``.

    Options:
        on: Exception class(es) to retry on, and/or the ``"error"``
            sentinel to retry on returned error values. Default ``[]``
            (retry on any exception).
        message: Only retry if the exception message contains this
            substring or matches this compiled pattern. Can be a list.
            Default ``[]`` (retry on any message).
        tries: How many times to retry. Default ``1``.
        sleep: Seconds to sleep between retries. Can be a function of the
            zero-based retry index. Default ``1``.
        after: Callable run exactly once, no matter how many retries
            happened. Default ``None``.

    Args:
        options_or_name: Literal options, the name of a stored
            configuration, or ``work`` itself when called with a single
            argument.
        work: Zero-argument callable to run.
        provider: Configuration provider holding defaults and named
            configurations. Defaults to the process-wide provider.
        sleeper: Sleep service receiving milliseconds. Defaults to a
            ``time.sleep`` based service.
        **options: Options overriding ``options_or_name``.

    Returns:
        The value returned by the last attempt. With ``on="error"``, this
        can be the last error value when tries are exhausted.

    Raises:
        ConfigurationError: If the options are invalid.
        Exception: The original exception raised by ``work`` when it is
            not retried or tries are exhausted.

    Example:
        ```pycon
        >>> from retryable import retryable
        >>> attempts = []
        >>> def flaky():
        ...     attempts.append(1)
        ...     if len(attempts) == 1:
        ...         raise TimeoutError("timed out")
        ...     return "ok"
        ...
        >>> retryable({"on": TimeoutError, "sleep": 0}, flaky)
        'ok'
        >>> retryable(flaky, sleep=0)
        'ok'

        ```

    Retry on returned error values:
        ```pycon
        >>> from retryable import retryable
        >>> results = iter(["error", {"ok": "success"}])
        >>> retryable({"on": "error", "sleep": 0}, lambda: next(results))
        {'ok': 'success'}

        ```
    """
    options_or_name, work = split_arguments(options_or_name, work)
    policy = resolve_policy(options_or_name, provider, **options)
    return RetryExecutor(policy, sleep=sleeper).execute(work)
