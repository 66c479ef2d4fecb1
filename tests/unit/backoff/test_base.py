r"""Unit tests for BaseBackoffStrategy."""

from __future__ import annotations

import pytest

from retryable.backoff import BaseBackoffStrategy


class DoublingBackoff(BaseBackoffStrategy):
    def calculate(self, attempt: int) -> float:
        return float(attempt * 2)


def test_base_backoff_is_abstract() -> None:
    with pytest.raises(TypeError):
        BaseBackoffStrategy()  # type: ignore[abstract]


def test_base_backoff_call_delegates_to_calculate() -> None:
    backoff = DoublingBackoff()
    assert backoff(3) == 6.0
    assert backoff(0) == backoff.calculate(0)
