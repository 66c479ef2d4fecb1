r"""Core defaults and validation shared by the resolver and the engine."""

from __future__ import annotations

__all__ = [
    "DEFAULT_OPTIONS",
    "DEFAULT_SLEEP",
    "DEFAULT_TRIES",
    "DEFAULTS_NAME",
    "ERROR",
    "OPTION_KEYS",
    "validate_option_keys",
    "validate_sleep",
    "validate_tries",
]

from retryable.core.config import (
    DEFAULT_OPTIONS,
    DEFAULT_SLEEP,
    DEFAULT_TRIES,
    DEFAULTS_NAME,
    ERROR,
    OPTION_KEYS,
)
from retryable.core.validation import validate_option_keys, validate_sleep, validate_tries
