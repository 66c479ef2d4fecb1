r"""Match predicates used to decide whether a failure qualifies for retry."""

from __future__ import annotations

__all__ = ["default_error_predicate", "kind_matches", "message_matches"]

import re
from typing import TYPE_CHECKING, Any

from retryable.core.config import ERROR

if TYPE_CHECKING:
    from collections.abc import Sequence

    from retryable.engine.policy import MessageMatcher


def kind_matches(error: BaseException, kinds: Sequence[type[BaseException]]) -> bool:
    """Return whether ``error`` is an instance of one of ``kinds``.

    An empty ``kinds`` matches every error.

    Example:
        ```pycon
        >>> from retryable.engine.matchers import kind_matches
        >>> kind_matches(ValueError("x"), ())
        True
        >>> kind_matches(ValueError("x"), (TypeError,))
        False
        >>> kind_matches(ConnectionResetError(), (ConnectionError,))
        True

        ```
    """
    if not kinds:
        return True
    return isinstance(error, tuple(kinds))


def message_matches(message: str, matchers: Sequence[MessageMatcher]) -> bool:
    """Return whether ``message`` matches any of ``matchers``.

    A string matcher matches when it is a substring of ``message``; a
    compiled pattern matches when ``pattern.search`` finds it anywhere in
    ``message``. An empty ``matchers`` matches every message.

    Example:
        ```pycon
        >>> import re
        >>> from retryable.engine.matchers import message_matches
        >>> message_matches("bad args", ["bad"])
        True
        >>> message_matches("good args", ["blah", re.compile(r"bad")])
        False
        >>> message_matches("anything", [])
        True

        ```
    """
    if not matchers:
        return True
    for matcher in matchers:
        if isinstance(matcher, re.Pattern):
            if matcher.search(message) is not None:
                return True
        elif matcher in message:
            return True
    return False


def default_error_predicate(value: Any) -> bool:
    """Return whether ``value`` looks like an error result.

    Recognizes the bare ``"error"`` sentinel and tuples tagged with it as
    first element, such as ``("error", reason)``.

    Example:
        ```pycon
        >>> from retryable.engine.matchers import default_error_predicate
        >>> default_error_predicate("error")
        True
        >>> default_error_predicate(("error", "fail", "extra"))
        True
        >>> default_error_predicate(("ok", "value"))
        False
        >>> default_error_predicate({"ok": "success"})
        False

        ```
    """
    if isinstance(value, str):
        return value == ERROR
    if isinstance(value, tuple) and value:
        first = value[0]
        return isinstance(first, str) and first == ERROR
    return False
