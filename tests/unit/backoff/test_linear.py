r"""Unit tests for LinearBackoff strategy."""

from __future__ import annotations

import pytest

from retryable.backoff import LinearBackoff


def test_linear_backoff_basic() -> None:
    backoff = LinearBackoff(base_delay=1.0)
    assert backoff.calculate(0) == 1.0
    assert backoff.calculate(1) == 2.0
    assert backoff.calculate(2) == 3.0


def test_linear_backoff_custom_base_delay() -> None:
    backoff = LinearBackoff(base_delay=0.5)
    assert backoff(0) == 0.5
    assert backoff(3) == 2.0


def test_linear_backoff_default_values() -> None:
    assert LinearBackoff().base_delay == 1.0


def test_linear_backoff_invalid_base_delay() -> None:
    with pytest.raises(ValueError, match=r"base_delay must be non-negative"):
        LinearBackoff(base_delay=-0.1)
