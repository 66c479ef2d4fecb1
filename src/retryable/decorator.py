r"""Decorator form of ``retryable``.

Each call of the decorated function resolves the options again and runs
the call through ``retryable``, so changes to the configuration provider
are picked up and every call gets its own ``after`` invocation.
"""

from __future__ import annotations

__all__ = ["retry"]

import functools
import inspect
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from retryable.call import retryable
from retryable.call_async import retryable_async
from retryable.exceptions import ConfigurationError

if TYPE_CHECKING:
    from collections.abc import Callable

    from retryable.config import ConfigProvider


def retry(
    options_or_name: str | Mapping[str, Any] | Callable[..., Any] | None = None,
    *,
    provider: ConfigProvider | None = None,
    sleeper: Callable[[int], Any] | None = None,
    **options: Any,
) -> Any:
    """Decorate a function so that its calls are retried.

    Coroutine functions are run through ``retryable_async``; in that case
    ``sleeper`` must be an async sleep service.

    Example:
        ```pycon
        >>> from retryable import retry
        >>> calls = []
        >>> @retry(on=ConnectionError, tries=2, sleep=0)
        ... def ping(host):
        ...     calls.append(host)
        ...     if len(calls) < 2:
        ...         raise ConnectionError("refused")
        ...     return f"pong from {host}"
        ...
        >>> ping("localhost")
        'pong from localhost'
        >>> calls
        ['localhost', 'localhost']

        ```
    """

    def decorator(func: Callable[..., Any]) -> Callable[..., Any]:
        if inspect.iscoroutinefunction(func):

            @functools.wraps(func)
            async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
                return await retryable_async(
                    options_or_name,
                    lambda: func(*args, **kwargs),
                    provider=provider,
                    sleeper=sleeper,
                    **options,
                )

            return async_wrapper

        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            return retryable(
                options_or_name,
                lambda: func(*args, **kwargs),
                provider=provider,
                sleeper=sleeper,
                **options,
            )

        return wrapper

    if isinstance(options_or_name, type) and issubclass(options_or_name, BaseException):
        msg = (
            f"retry() got the exception class {options_or_name.__qualname__} as options; "
            f"use retry(on={options_or_name.__qualname__}) to retry on it"
        )
        raise ConfigurationError(msg, option="on")

    # Bare ``@retry`` usage
    if callable(options_or_name) and not isinstance(options_or_name, (str, Mapping)):
        return retry(provider=provider, sleeper=sleeper, **options)(options_or_name)
    return decorator
