r"""Tagged outcomes of a single attempt.

The engine turns every invocation of the work into either a ``Success``
carrying the returned value or a ``Failure`` carrying the raised
exception, and decides what to do next from that.
"""

from __future__ import annotations

__all__ = ["Failure", "Outcome", "Success", "capture", "capture_async"]

import inspect
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Generic, TypeVar, Union

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

T = TypeVar("T")


@dataclass(frozen=True)
class Success(Generic[T]):
    """The work returned ``value``."""

    value: T


@dataclass(frozen=True)
class Failure:
    """The work raised ``error``."""

    error: Exception


Outcome = Union[Success[Any], Failure]


def capture(work: Callable[[], T]) -> Success[T] | Failure:
    """Invoke ``work`` once and tag the result.

    Only ``Exception`` subclasses are captured. ``KeyboardInterrupt``,
    ``SystemExit`` and other ``BaseException`` subclasses propagate.

    Example:
        ```pycon
        >>> from retryable.engine.outcome import capture
        >>> capture(lambda: 42)
        Success(value=42)
        >>> capture(lambda: 1 / 0)
        Failure(error=ZeroDivisionError('division by zero'))

        ```
    """
    try:
        return Success(work())
    except Exception as exc:  # noqa: BLE001
        return Failure(exc)


async def capture_async(work: Callable[[], Awaitable[T]]) -> Success[T] | Failure:
    """Await ``work()`` once and tag the result.

    Raises:
        TypeError: If ``work()`` does not return an awaitable. This is
            a usage error, not an attempt failure, so it is never retried.
    """
    try:
        result = work()
    except Exception as exc:  # noqa: BLE001
        return Failure(exc)
    if not inspect.isawaitable(result):
        msg = f"work must return an awaitable, got {type(result).__qualname__}"
        raise TypeError(msg)
    try:
        return Success(await result)
    except Exception as exc:  # noqa: BLE001
        return Failure(exc)
