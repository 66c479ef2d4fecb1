from __future__ import annotations

from typing import TYPE_CHECKING
from unittest.mock import Mock, patch

import pytest

from retryable.config import DictConfigProvider, set_default_provider

if TYPE_CHECKING:
    from collections.abc import Generator


@pytest.fixture
def mock_sleep() -> Generator[Mock, None, None]:
    """Patch time.sleep to make tests run faster."""
    with patch("time.sleep", return_value=None) as mock:
        yield mock


@pytest.fixture
def mock_asleep() -> Generator[Mock, None, None]:
    """Patch asyncio.sleep to make tests run faster."""
    with patch("asyncio.sleep", return_value=None) as mock:
        yield mock


@pytest.fixture
def sleeper() -> Mock:
    """Create a mock sleep service receiving milliseconds."""
    return Mock(return_value=None)


@pytest.fixture
def provider() -> DictConfigProvider:
    """Create a provider mirroring a typical application configuration."""
    return DictConfigProvider(
        {
            "defaults": {"sleep": 0.001},
            "test": {"message": "foobar", "tries": 2},
        }
    )


@pytest.fixture(autouse=True)
def default_provider() -> Generator[DictConfigProvider, None, None]:
    """Give every test an empty process-wide provider."""
    fresh = DictConfigProvider()
    previous = set_default_provider(fresh)
    yield fresh
    set_default_provider(previous)
