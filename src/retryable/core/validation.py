r"""Validation utilities for retry options.

These functions check individual option values before they are used
to build a ``Policy`` and raise ``ConfigurationError`` with a message
naming the offending option.
"""

from __future__ import annotations

__all__ = ["validate_option_keys", "validate_sleep", "validate_tries"]

from typing import TYPE_CHECKING, Any

from retryable.core.config import OPTION_KEYS
from retryable.exceptions import ConfigurationError

if TYPE_CHECKING:
    from collections.abc import Iterable


def validate_option_keys(keys: Iterable[str]) -> None:
    """Validate that only known option keys are used.

    Args:
        keys: The option keys to check.

    Raises:
        ConfigurationError: If any key is not a known option.

    Example:
        ```pycon
        >>> from retryable.core.validation import validate_option_keys
        >>> validate_option_keys(["on", "tries"])
        >>> validate_option_keys(["retries"])  # doctest: +SKIP
        Traceback (most recent call last):
        ...
        retryable.exceptions.ConfigurationError: unknown option(s): retries

        ```
    """
    unknown = sorted(str(key) for key in keys if key not in OPTION_KEYS)
    if unknown:
        msg = f"unknown option(s): {', '.join(unknown)}"
        raise ConfigurationError(msg)


def validate_tries(tries: Any) -> int:
    """Validate the ``tries`` option.

    Args:
        tries: Number of retries after the first attempt. Must be an
            integer >= 0. A value of 0 means a single attempt.

    Returns:
        The validated number of retries.

    Raises:
        ConfigurationError: If ``tries`` is not an integer or is negative.

    Example:
        ```pycon
        >>> from retryable.core.validation import validate_tries
        >>> validate_tries(3)
        3
        >>> validate_tries(0)
        0

        ```
    """
    if isinstance(tries, bool) or not isinstance(tries, int):
        msg = f"tries must be an integer, got {tries!r}"
        raise ConfigurationError(msg, option="tries")
    if tries < 0:
        msg = f"tries must be >= 0, got {tries}"
        raise ConfigurationError(msg, option="tries")
    return tries


def validate_sleep(sleep: Any) -> Any:
    """Validate the ``sleep`` option.

    Args:
        sleep: Seconds to sleep between attempts (int or float >= 0), or
            a callable receiving the zero-based retry index and returning
            seconds.

    Returns:
        The validated sleep option, unchanged.

    Raises:
        ConfigurationError: If ``sleep`` is neither a non-negative number
            nor a callable.
    """
    if callable(sleep):
        return sleep
    if isinstance(sleep, bool) or not isinstance(sleep, (int, float)):
        msg = f"sleep must be a number of seconds or a callable, got {sleep!r}"
        raise ConfigurationError(msg, option="sleep")
    if sleep < 0:
        msg = f"sleep must be >= 0, got {sleep}"
        raise ConfigurationError(msg, option="sleep")
    return sleep
