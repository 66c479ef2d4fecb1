r"""Configuration providers for default and named retry options.

A provider maps a name to an option mapping. The name ``"defaults"``
holds the options every call inherits; any other name is a reusable
named policy. Unknown names resolve to an empty mapping, so looking up
a policy that was never configured simply falls back to the defaults.

Example:
    ```pycon
    >>> from retryable.config import DictConfigProvider
    >>> provider = DictConfigProvider(
    ...     {"defaults": {"sleep": 0.5}, "aws": {"message": "throttl", "tries": 5}}
    ... )
    >>> provider.get("aws")
    {'message': 'throttl', 'tries': 5}
    >>> provider.get("unknown")
    {}

    ```
"""

from __future__ import annotations

__all__ = [
    "ConfigProvider",
    "DictConfigProvider",
    "configure",
    "get_default_provider",
    "set_default_provider",
]

import logging
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

from retryable.core.config import DEFAULTS_NAME
from retryable.core.validation import validate_option_keys

if TYPE_CHECKING:
    from collections.abc import Mapping

logger: logging.Logger = logging.getLogger(__name__)


@runtime_checkable
class ConfigProvider(Protocol):
    """Interface of a configuration provider."""

    def get(self, name: str) -> Mapping[str, Any]:
        """Return the options stored under ``name``, or an empty mapping."""


class DictConfigProvider:
    """Configuration provider backed by plain dictionaries.

    Args:
        configs: Optional initial mapping of names to option mappings.
            Option keys are validated when stored.

    Example:
        ```pycon
        >>> from retryable.config import DictConfigProvider
        >>> provider = DictConfigProvider()
        >>> provider.set("defaults", tries=3)
        >>> provider.get("defaults")
        {'tries': 3}
        >>> provider.names()
        ['defaults']

        ```
    """

    def __init__(self, configs: Mapping[str, Mapping[str, Any]] | None = None) -> None:
        self._configs: dict[str, dict[str, Any]] = {}
        for name, options in (configs or {}).items():
            self.set(name, **options)

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(names={self.names()})"

    def get(self, name: str) -> dict[str, Any]:
        return dict(self._configs.get(name, {}))

    def set(self, name: str, **options: Any) -> None:
        """Store (replace) the options under ``name``.

        Raises:
            ConfigurationError: If an option key is unknown.
        """
        validate_option_keys(options)
        logger.debug(f"Storing retry options under {name!r}: {sorted(options)}")
        self._configs[name] = dict(options)

    def remove(self, name: str) -> None:
        self._configs.pop(name, None)

    def names(self) -> list[str]:
        return sorted(self._configs)


_default_provider: ConfigProvider = DictConfigProvider()


def get_default_provider() -> ConfigProvider:
    """Return the process-wide provider used when none is passed."""
    return _default_provider


def set_default_provider(provider: ConfigProvider) -> ConfigProvider:
    """Replace the process-wide provider.

    Args:
        provider: The new default provider.

    Returns:
        The previous default provider, so it can be restored later.
    """
    global _default_provider  # noqa: PLW0603
    previous = _default_provider
    _default_provider = provider
    return previous


def configure(name: str = DEFAULTS_NAME, **options: Any) -> None:
    """Store options under ``name`` in the process-wide provider.

    Args:
        name: The configuration name. Defaults to ``"defaults"``.
        **options: The retry options to store.

    Raises:
        TypeError: If the default provider cannot store options.

    Example:
        ```pycon
        >>> from retryable.config import configure, get_default_provider
        >>> configure("flaky_api", tries=5, sleep=0.1)
        >>> get_default_provider().get("flaky_api")
        {'tries': 5, 'sleep': 0.1}

        ```
    """
    provider = get_default_provider()
    if not isinstance(provider, DictConfigProvider):
        msg = f"configure() requires a DictConfigProvider, got {type(provider).__qualname__}"
        raise TypeError(msg)
    provider.set(name, **options)
