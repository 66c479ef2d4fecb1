r"""Fibonacci backoff strategy."""

from __future__ import annotations

__all__ = ["FibonacciBackoff"]

from retryable.backoff.base import BaseBackoffStrategy, check_non_negative


class FibonacciBackoff(BaseBackoffStrategy):
    """Fibonacci backoff strategy.

    Calculates delay as: base_delay * fibonacci(attempt + 1).

    The Fibonacci sequence (1, 1, 2, 3, 5, 8, 13, ...) grows more gently
    than powers of two, which makes it a middle ground between linear
    and exponential backoff.

    Args:
        base_delay: The base delay in seconds (default: 1.0).

    Example:
        ```pycon
        >>> from retryable.backoff import FibonacciBackoff
        >>> backoff = FibonacciBackoff(base_delay=1.0)
        >>> [backoff.calculate(attempt) for attempt in range(6)]
        [1.0, 1.0, 2.0, 3.0, 5.0, 8.0]

        ```
    """

    def __init__(self, base_delay: float = 1.0) -> None:
        check_non_negative("base_delay", base_delay)
        self.base_delay = base_delay

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(base_delay={self.base_delay})"

    @staticmethod
    def _fibonacci(n: int) -> int:
        """Calculate the nth Fibonacci number (1-indexed)."""
        if n <= 0:
            return 0
        a, b = 0, 1
        for _ in range(n - 1):
            a, b = b, a + b
        return b

    def calculate(self, attempt: int) -> float:
        return self.base_delay * self._fibonacci(attempt + 1)
