r"""Option resolution: from literal or named options to a ``Policy``.

Options are layered, later layers winning key by key:

1. the built-in defaults (``on=[]``, ``message=[]``, ``tries=1``,
   ``sleep=1``, ``after=None``),
2. the provider's ``"defaults"`` mapping,
3. the named configuration, or the literal option mapping,
4. keyword overrides passed to the call.

Shorthand forms are then normalized: a single exception class or
message becomes a one-element tuple, duplicates are dropped, and the
``"error"`` sentinel in ``on`` turns into an error predicate over
returned values.
"""

from __future__ import annotations

__all__ = ["normalize_message", "normalize_on", "resolve_options", "resolve_policy"]

import logging
import re
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from retryable.config import get_default_provider
from retryable.core.config import DEFAULT_OPTIONS, DEFAULTS_NAME, ERROR
from retryable.core.validation import validate_option_keys
from retryable.engine.matchers import default_error_predicate
from retryable.engine.policy import Policy
from retryable.exceptions import ConfigurationError

if TYPE_CHECKING:
    from collections.abc import Callable

    from retryable.config import ConfigProvider
    from retryable.engine.policy import MessageMatcher

logger: logging.Logger = logging.getLogger(__name__)


def _is_error_pair(entry: Any) -> bool:
    return (
        isinstance(entry, tuple)
        and len(entry) == 2
        and isinstance(entry[0], str)
        and entry[0] == ERROR
        and callable(entry[1])
        and not isinstance(entry[1], type)
    )


def _as_list(value: Any) -> list[Any]:
    if value is None:
        return []
    if isinstance(value, (list, set, frozenset)):
        return list(value)
    if isinstance(value, tuple) and not _is_error_pair(value):
        return list(value)
    return [value]


def normalize_on(
    on: Any,
) -> tuple[tuple[type[BaseException], ...], Callable[[Any], bool] | None]:
    """Split the ``on`` option into exception kinds and an error predicate.

    Args:
        on: An exception class, the ``"error"`` sentinel, an
            ``("error", predicate)`` pair, or a list of these.

    Returns:
        Tuple of (exception kinds, error predicate or ``None``).

    Raises:
        ConfigurationError: If an entry is not recognized, or if more
            than one distinct explicit predicate is given.

    Example:
        ```pycon
        >>> from retryable.options import normalize_on
        >>> normalize_on([ValueError, ValueError, TypeError])
        ((<class 'ValueError'>, <class 'TypeError'>), None)
        >>> kinds, predicate = normalize_on("error")
        >>> kinds, predicate("error")
        ((), True)

        ```
    """
    kinds: list[type[BaseException]] = []
    predicates: list[Callable[[Any], bool]] = []
    bare_error = False
    for entry in _as_list(on):
        if isinstance(entry, str) and entry == ERROR:
            bare_error = True
        elif _is_error_pair(entry):
            predicates.append(entry[1])
        elif isinstance(entry, type) and issubclass(entry, BaseException):
            kinds.append(entry)
        else:
            msg = (
                f"on entries must be exception classes, {ERROR!r} or "
                f"({ERROR!r}, predicate) pairs, got {entry!r}"
            )
            raise ConfigurationError(msg, option="on")

    predicates = list(dict.fromkeys(predicates))
    if len(predicates) > 1:
        msg = f"on accepts at most one ({ERROR!r}, predicate) pair, got {len(predicates)}"
        raise ConfigurationError(msg, option="on")

    if predicates:
        predicate: Callable[[Any], bool] | None = predicates[0]
    elif bare_error:
        predicate = default_error_predicate
    else:
        predicate = None
    return tuple(dict.fromkeys(kinds)), predicate


def normalize_message(message: Any) -> tuple[MessageMatcher, ...]:
    """Normalize the ``message`` option into a tuple of unique matchers.

    Example:
        ```pycon
        >>> from retryable.options import normalize_message
        >>> normalize_message("timeout")
        ('timeout',)
        >>> normalize_message(["a", "b", "a"])
        ('a', 'b')

        ```
    """
    matchers = _as_list(message)
    for matcher in matchers:
        if not isinstance(matcher, (str, re.Pattern)):
            msg = f"message entries must be str or re.Pattern, got {matcher!r}"
            raise ConfigurationError(msg, option="message")
    return tuple(dict.fromkeys(matchers))


def resolve_options(
    options_or_name: str | Mapping[str, Any] | None = None,
    provider: ConfigProvider | None = None,
    **overrides: Any,
) -> dict[str, Any]:
    """Merge the option layers without normalizing them.

    Args:
        options_or_name: A configuration name, a literal option mapping,
            or ``None`` for defaults only.
        provider: The configuration provider. Defaults to the
            process-wide provider.
        **overrides: Options taking precedence over everything else.

    Returns:
        The merged option dictionary.

    Raises:
        ConfigurationError: If ``options_or_name`` has an unsupported type
            or a layer contains an unknown option key.

    Example:
        ```pycon
        >>> from retryable.config import DictConfigProvider
        >>> from retryable.options import resolve_options
        >>> provider = DictConfigProvider({"defaults": {"sleep": 0.001}, "test": {"tries": 2}})
        >>> options = resolve_options("test", provider)
        >>> options["tries"], options["sleep"]
        (2, 0.001)

        ```
    """
    if provider is None:
        provider = get_default_provider()

    if options_or_name is None:
        literal: Mapping[str, Any] = {}
    elif isinstance(options_or_name, str):
        # Unknown names resolve to an empty mapping, i.e. defaults only.
        literal = provider.get(options_or_name)
        if not literal and options_or_name != DEFAULTS_NAME:
            logger.debug(f"No retry configuration named {options_or_name!r}, using defaults")
    elif isinstance(options_or_name, Mapping):
        literal = options_or_name
    else:
        msg = (
            "retry options must be a mapping or a configuration name, "
            f"got {type(options_or_name).__qualname__}"
        )
        raise ConfigurationError(msg)

    merged = dict(DEFAULT_OPTIONS)
    for layer in (provider.get(DEFAULTS_NAME), literal, overrides):
        validate_option_keys(layer)
        merged.update(layer)
    return merged


def resolve_policy(
    options_or_name: str | Mapping[str, Any] | None = None,
    provider: ConfigProvider | None = None,
    **overrides: Any,
) -> Policy:
    """Resolve options into a canonical ``Policy``.

    Args:
        options_or_name: A configuration name, a literal option mapping,
            or ``None`` for defaults only.
        provider: The configuration provider. Defaults to the
            process-wide provider.
        **overrides: Options taking precedence over everything else.

    Returns:
        The resolved policy.

    Raises:
        ConfigurationError: If any option is invalid.

    Example:
        ```pycon
        >>> from retryable.config import DictConfigProvider
        >>> from retryable.options import resolve_policy
        >>> policy = resolve_policy(
        ...     {"on": [ValueError, "error"], "message": "bad", "tries": 3},
        ...     provider=DictConfigProvider(),
        ... )
        >>> policy.on, policy.message, policy.tries, policy.sleep
        ((<class 'ValueError'>,), ('bad',), 3, 1)
        >>> policy.error_predicate(("error", "no"))
        True

        ```
    """
    options = resolve_options(options_or_name, provider, **overrides)
    on, error_predicate = normalize_on(options["on"])
    kwargs: dict[str, Any] = {
        "tries": options["tries"],
        "on": on,
        "message": normalize_message(options["message"]),
        "error_predicate": error_predicate,
        "sleep": options["sleep"],
    }
    if options["after"] is not None:
        kwargs["after"] = options["after"]
    policy = Policy(**kwargs)
    logger.debug(
        f"Resolved retry policy: tries={policy.tries}, on={[k.__name__ for k in on]}, "
        f"message={list(policy.message)}, error_predicate={error_predicate is not None}"
    )
    return policy
