r"""Linear backoff strategy."""

from __future__ import annotations

__all__ = ["LinearBackoff"]

from retryable.backoff.base import BaseBackoffStrategy, check_non_negative


class LinearBackoff(BaseBackoffStrategy):
    """Linear backoff strategy.

    Calculates delay as: base_delay * (attempt + 1).

    Args:
        base_delay: The base delay in seconds (default: 1.0).

    Example:
        ```pycon
        >>> from retryable.backoff import LinearBackoff
        >>> backoff = LinearBackoff(base_delay=1.0)
        >>> backoff.calculate(0)  # First retry: 1.0 * 1
        1.0
        >>> backoff.calculate(2)  # Third retry: 1.0 * 3
        3.0

        ```
    """

    def __init__(self, base_delay: float = 1.0) -> None:
        check_non_negative("base_delay", base_delay)
        self.base_delay = base_delay

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(base_delay={self.base_delay})"

    def calculate(self, attempt: int) -> float:
        return self.base_delay * (attempt + 1)
