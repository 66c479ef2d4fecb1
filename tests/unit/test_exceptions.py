r"""Unit tests for exceptions."""

from __future__ import annotations

import pytest

from retryable.exceptions import ConfigurationError, RetryableError


def test_configuration_error_hierarchy() -> None:
    assert issubclass(ConfigurationError, RetryableError)
    assert issubclass(ConfigurationError, ValueError)


def test_configuration_error_option() -> None:
    error = ConfigurationError("tries must be >= 0, got -1", option="tries")
    assert error.option == "tries"
    assert str(error) == "tries must be >= 0, got -1"


def test_configuration_error_option_default() -> None:
    assert ConfigurationError("bad").option is None


def test_configuration_error_is_catchable_as_value_error() -> None:
    with pytest.raises(ValueError, match=r"bad"):
        raise ConfigurationError("bad")
