r"""Unit tests for the ``retryable_async`` entry point."""

from __future__ import annotations

from unittest.mock import AsyncMock, Mock, call

import pytest

from retryable import DictConfigProvider, retryable_async


@pytest.fixture
def asleeper() -> AsyncMock:
    return AsyncMock(return_value=None)


@pytest.mark.asyncio
async def test_retryable_async_retries(asleeper: AsyncMock) -> None:
    work = AsyncMock(side_effect=[ConnectionError("reset"), "ok"])

    assert await retryable_async({"on": ConnectionError}, work, sleeper=asleeper) == "ok"
    assert work.await_count == 2
    asleeper.assert_awaited_once_with(1000)


@pytest.mark.asyncio
async def test_retryable_async_single_argument_form(mock_asleep: Mock) -> None:
    work = AsyncMock(side_effect=[ValueError(), "ok"])

    assert await retryable_async(work, sleep=0) == "ok"
    mock_asleep.assert_called_once_with(0.0)


@pytest.mark.asyncio
async def test_retryable_async_error_sentinel(asleeper: AsyncMock) -> None:
    work = AsyncMock(side_effect=["error", {"ok": "success"}])

    assert await retryable_async({"on": "error"}, work, sleeper=asleeper) == {"ok": "success"}


@pytest.mark.asyncio
async def test_retryable_async_named_config(
    provider: DictConfigProvider, asleeper: AsyncMock
) -> None:
    work = AsyncMock(side_effect=[ValueError("foobar"), ValueError("foobar"), ValueError("foobar")])
    after = Mock()

    with pytest.raises(ValueError, match=r"foobar"):
        await retryable_async("test", work, provider=provider, sleeper=asleeper, after=after)

    assert work.await_count == 3
    assert asleeper.await_args_list == [call(1), call(1)]
    after.assert_called_once_with()


@pytest.mark.asyncio
async def test_retryable_async_rejects_sync_work() -> None:
    asleeper = AsyncMock(return_value=None)
    work = Mock(return_value=5)

    with pytest.raises(TypeError, match=r"work must return an awaitable"):
        await retryable_async({"tries": 2}, work, sleeper=asleeper)

    work.assert_called_once_with()
    asleeper.assert_not_called()
