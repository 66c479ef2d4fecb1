r"""Exponential backoff strategy."""

from __future__ import annotations

__all__ = ["ExponentialBackoff"]

from retryable.backoff.base import BaseBackoffStrategy, check_non_negative


class ExponentialBackoff(BaseBackoffStrategy):
    """Exponential backoff strategy.

    Calculates delay as: base_delay * (2 ** attempt). There is no upper
    bound on the delay, so keep ``tries`` reasonable.

    Args:
        base_delay: The base delay in seconds (default: 1.0).

    Example:
        ```pycon
        >>> from retryable.backoff import ExponentialBackoff
        >>> backoff = ExponentialBackoff(base_delay=0.5)
        >>> backoff.calculate(0)
        0.5
        >>> backoff.calculate(1)
        1.0
        >>> backoff.calculate(3)
        4.0

        ```
    """

    def __init__(self, base_delay: float = 1.0) -> None:
        check_non_negative("base_delay", base_delay)
        self.base_delay = base_delay

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(base_delay={self.base_delay})"

    def calculate(self, attempt: int) -> float:
        """Calculate exponential backoff delay.

        Args:
            attempt: The retry index (0-indexed).

        Returns:
            The calculated delay: base_delay * (2 ** attempt).
        """
        return self.base_delay * (2**attempt)
