r"""Utility functions for the retry engine.

This package provides the sleep services used between attempts and the
conversion from seconds to the milliseconds they expect.
"""

from __future__ import annotations

__all__ = ["asleep_milliseconds", "sleep_milliseconds", "to_milliseconds"]

from retryable.utils.sleep import asleep_milliseconds, sleep_milliseconds, to_milliseconds
