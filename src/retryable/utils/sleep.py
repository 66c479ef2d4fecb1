r"""Sleep services used between retry attempts.

A sleep service is a callable receiving a non-negative number of
milliseconds. The engine computes durations in seconds and converts them
with ``to_milliseconds`` before calling the service, so any service
working in integral units can be plugged in.
"""

from __future__ import annotations

__all__ = ["asleep_milliseconds", "sleep_milliseconds", "to_milliseconds"]

import asyncio
import time


def to_milliseconds(seconds: float) -> int:
    """Convert a duration in seconds to whole milliseconds.

    Args:
        seconds: The duration in seconds. Sub-second values are kept by
            rounding to the nearest millisecond.

    Returns:
        The duration in milliseconds.

    Raises:
        ValueError: If ``seconds`` is negative.

    Example:
        ```pycon
        >>> from retryable.utils.sleep import to_milliseconds
        >>> to_milliseconds(1)
        1000
        >>> to_milliseconds(0.0014)
        1
        >>> to_milliseconds(0.0016)
        2

        ```
    """
    if seconds < 0:
        msg = f"sleep duration must be non-negative, got {seconds}"
        raise ValueError(msg)
    return round(seconds * 1000)


def sleep_milliseconds(milliseconds: int) -> None:
    """Block the current thread for the given number of milliseconds."""
    time.sleep(milliseconds / 1000)


async def asleep_milliseconds(milliseconds: int) -> None:
    """Suspend the current task for the given number of milliseconds."""
    await asyncio.sleep(milliseconds / 1000)
