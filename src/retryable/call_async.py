r"""Implement the ``retryable_async`` entry point."""

from __future__ import annotations

__all__ = ["retryable_async"]

from typing import TYPE_CHECKING, Any, TypeVar

from retryable.call import split_arguments
from retryable.engine.executor_async import AsyncRetryExecutor
from retryable.options import resolve_policy

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable, Mapping

    from retryable.config import ConfigProvider

T = TypeVar("T")


async def retryable_async(
    options_or_name: str | Mapping[str, Any] | Callable[[], Awaitable[T]] | None = None,
    work: Callable[[], Awaitable[T]] | None = None,
    *,
    provider: ConfigProvider | None = None,
    sleeper: Callable[[int], Awaitable[object]] | None = None,
    **options: Any,
) -> T:
    """Maybe retry some async code.

    This is the ``asyncio`` counterpart of ``retryable``: ``work`` returns
    an awaitable and the default sleep service is ``asyncio.sleep``
    based. Options and semantics are identical.

    Example:
        ```pycon
        >>> import asyncio
        >>> from retryable import retryable_async
        >>> async def fetch():
        ...     return 42
        ...
        >>> asyncio.run(retryable_async({"tries": 3}, fetch))
        42

        ```
    """
    options_or_name, work = split_arguments(options_or_name, work)
    policy = resolve_policy(options_or_name, provider, **options)
    return await AsyncRetryExecutor(policy, sleep=sleeper).execute(work)
