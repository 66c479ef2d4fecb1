r"""Exceptions raised by the retryable package.

Failures raised by the wrapped work are never wrapped: they propagate
unchanged. The types defined here only cover problems detected by the
library itself, such as invalid retry options.
"""

from __future__ import annotations

__all__ = ["ConfigurationError", "RetryableError"]


class RetryableError(Exception):
    """Base class for all errors raised by the retryable package."""


class ConfigurationError(RetryableError, ValueError):
    """Raised when retry options cannot be resolved into a policy.

    Args:
        message: Human-readable description of the problem.
        option: Name of the offending option, if any.

    Attributes:
        option: Name of the offending option, if any.

    Example:
        ```pycon
        >>> from retryable.exceptions import ConfigurationError
        >>> error = ConfigurationError("tries must be >= 0, got -1", option="tries")
        >>> error.option
        'tries'
        >>> str(error)
        'tries must be >= 0, got -1'

        ```
    """

    def __init__(self, message: str, option: str | None = None) -> None:
        super().__init__(message)
        self.option = option
