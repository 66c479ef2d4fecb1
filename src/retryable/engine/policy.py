r"""Resolved, immutable retry policy.

A ``Policy`` is the canonical form of the retry options. It is built
once per ``retryable`` call by the option resolver and is never mutated
afterwards.
"""

from __future__ import annotations

__all__ = ["Policy"]

import re
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Union

from retryable.core.config import DEFAULT_SLEEP, DEFAULT_TRIES
from retryable.core.validation import validate_sleep, validate_tries
from retryable.exceptions import ConfigurationError

if TYPE_CHECKING:
    from collections.abc import Callable

MessageMatcher = Union[str, re.Pattern]


def _noop() -> None:
    return None


@dataclass(frozen=True)
class Policy:
    """Retry policy for a single ``retryable`` invocation.

    Attributes:
        tries: Number of retries allowed after the first attempt. The
            work is invoked at most ``tries + 1`` times.
        on: Exception classes to retry on. Empty means any exception.
        message: Substrings or compiled patterns the exception message
            must match. Empty means any message.
        error_predicate: Optional predicate over returned values. When
            set, a returned value for which it is true is retried like a
            failure. When ``None``, returned values are never retried.
        sleep: Seconds to sleep between attempts, or a callable receiving
            the zero-based retry index and returning seconds.
        after: Hook run exactly once after the retry sequence ends.

    Example:
        ```pycon
        >>> from retryable.engine.policy import Policy
        >>> policy = Policy(tries=3, on=(TimeoutError,), sleep=0.1)
        >>> policy.max_attempts
        4
        >>> policy.sleep_for(2)
        0.1

        ```
    """

    tries: int = DEFAULT_TRIES
    on: tuple[type[BaseException], ...] = ()
    message: tuple[MessageMatcher, ...] = ()
    error_predicate: Callable[[Any], bool] | None = None
    sleep: float | Callable[[int], float] = DEFAULT_SLEEP
    after: Callable[[], Any] = field(default=_noop)

    def __post_init__(self) -> None:
        on = (self.on,) if isinstance(self.on, type) else self.on
        message = (self.message,) if isinstance(self.message, (str, re.Pattern)) else self.message
        object.__setattr__(self, "on", tuple(on))
        object.__setattr__(self, "message", tuple(message))
        validate_tries(self.tries)
        validate_sleep(self.sleep)
        for kind in self.on:
            if not (isinstance(kind, type) and issubclass(kind, BaseException)):
                msg = f"on entries must be exception classes, got {kind!r}"
                raise ConfigurationError(msg, option="on")
        for matcher in self.message:
            if not isinstance(matcher, (str, re.Pattern)):
                msg = f"message entries must be str or re.Pattern, got {matcher!r}"
                raise ConfigurationError(msg, option="message")
        if not callable(self.after):
            msg = f"after must be callable, got {self.after!r}"
            raise ConfigurationError(msg, option="after")

    @property
    def max_attempts(self) -> int:
        return self.tries + 1

    def sleep_for(self, attempt: int) -> float:
        """Return the seconds to sleep after the given retry index."""
        if callable(self.sleep):
            return self.sleep(attempt)
        return self.sleep
