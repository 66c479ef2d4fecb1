r"""Default option values for retryable.

The built-in defaults sit underneath the provider's ``defaults`` mapping
and any literal options given to ``retryable``.
"""

from __future__ import annotations

__all__ = [
    "DEFAULTS_NAME",
    "DEFAULT_OPTIONS",
    "DEFAULT_SLEEP",
    "DEFAULT_TRIES",
    "ERROR",
    "OPTION_KEYS",
]

from types import MappingProxyType
from typing import Any

# Sentinel used in ``on`` to retry on returned error values, and the value
# recognized by the default error predicate.
ERROR = "error"

# Name under which a config provider stores the defaults mapping
DEFAULTS_NAME = "defaults"

# Number of retries after the first attempt
# Total attempts = tries + 1
DEFAULT_TRIES = 1

# Seconds to sleep between attempts
DEFAULT_SLEEP = 1

DEFAULT_OPTIONS: MappingProxyType[str, Any] = MappingProxyType(
    {
        "on": (),
        "message": (),
        "tries": DEFAULT_TRIES,
        "sleep": DEFAULT_SLEEP,
        "after": None,
    }
)

OPTION_KEYS = frozenset(DEFAULT_OPTIONS)
