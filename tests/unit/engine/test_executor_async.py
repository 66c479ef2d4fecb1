r"""Unit tests for asynchronous retry executor."""

from __future__ import annotations

from unittest.mock import AsyncMock, Mock, call

import pytest

from retryable.engine import AsyncRetryExecutor, Policy
from retryable.engine.matchers import default_error_predicate


@pytest.fixture
def asleeper() -> AsyncMock:
    """Create a mock async sleep service receiving milliseconds."""
    return AsyncMock(return_value=None)


def test_async_retry_executor_creation() -> None:
    policy = Policy(tries=3)
    executor = AsyncRetryExecutor(policy)

    assert executor.policy is policy
    assert executor.decider.policy is policy
    assert executor.strategy.policy is policy


@pytest.mark.asyncio
async def test_async_retry_executor_default_sleep(mock_asleep: Mock) -> None:
    work = AsyncMock(side_effect=[ValueError("bad"), "ok"])

    assert await AsyncRetryExecutor(Policy(sleep=0.25)).execute(work) == "ok"
    mock_asleep.assert_called_once_with(0.25)


@pytest.mark.asyncio
async def test_async_retry_executor_success(asleeper: AsyncMock) -> None:
    work = AsyncMock(return_value="ok")

    assert await AsyncRetryExecutor(Policy(), sleep=asleeper).execute(work) == "ok"
    work.assert_awaited_once()
    asleeper.assert_not_called()


@pytest.mark.asyncio
async def test_async_retry_executor_always_failing(asleeper: AsyncMock) -> None:
    work = AsyncMock(side_effect=TimeoutError("slow"))
    after = Mock()

    with pytest.raises(TimeoutError, match=r"slow"):
        await AsyncRetryExecutor(Policy(tries=2, after=after), sleep=asleeper).execute(work)

    assert work.await_count == 3
    assert asleeper.await_args_list == [call(1000), call(1000)]
    after.assert_called_once_with()


@pytest.mark.asyncio
async def test_async_retry_executor_error_value_exhausted(asleeper: AsyncMock) -> None:
    work = AsyncMock(return_value=("error", "fail", "extra"))
    policy = Policy(tries=1, error_predicate=default_error_predicate)

    assert await AsyncRetryExecutor(policy, sleep=asleeper).execute(work) == (
        "error",
        "fail",
        "extra",
    )
    assert work.await_count == 2


@pytest.mark.asyncio
async def test_async_retry_executor_non_matching_kind(asleeper: AsyncMock) -> None:
    work = AsyncMock(side_effect=KeyError("k"))

    with pytest.raises(KeyError):
        await AsyncRetryExecutor(Policy(tries=3, on=(ValueError,)), sleep=asleeper).execute(work)

    assert work.await_count == 1
    asleeper.assert_not_called()


@pytest.mark.asyncio
async def test_async_retry_executor_backoff_indices(asleeper: AsyncMock) -> None:
    work = AsyncMock(side_effect=[ValueError(), ValueError(), "ok"])

    await AsyncRetryExecutor(Policy(tries=2, sleep=lambda n: n + 1), sleep=asleeper).execute(work)

    assert asleeper.await_args_list == [call(1000), call(2000)]


@pytest.mark.asyncio
async def test_async_retry_executor_non_awaitable_work(asleeper: AsyncMock) -> None:
    work = Mock(return_value=5)
    after = Mock()

    with pytest.raises(TypeError, match=r"work must return an awaitable, got int"):
        await AsyncRetryExecutor(Policy(tries=2, after=after), sleep=asleeper).execute(work)

    work.assert_called_once_with()
    asleeper.assert_not_called()
    after.assert_called_once_with()


@pytest.mark.asyncio
async def test_async_retry_executor_work_raising_before_await(asleeper: AsyncMock) -> None:
    work = Mock(side_effect=[ValueError("bad"), AsyncMock(return_value="ok")()])

    assert await AsyncRetryExecutor(Policy(tries=1), sleep=asleeper).execute(work) == "ok"
    assert work.call_count == 2
    asleeper.assert_awaited_once_with(1000)


@pytest.mark.asyncio
async def test_async_retry_executor_message_mismatch(asleeper: AsyncMock) -> None:
    work = AsyncMock(side_effect=TypeError("good args"))
    policy = Policy(tries=5, on=(TypeError,), message=("bad",))

    with pytest.raises(TypeError, match=r"good args"):
        await AsyncRetryExecutor(policy, sleep=asleeper).execute(work)

    assert work.await_count == 1
    asleeper.assert_not_called()


@pytest.mark.asyncio
async def test_async_retry_executor_tries_zero(asleeper: AsyncMock) -> None:
    work = AsyncMock(side_effect=ValueError("bad"))

    with pytest.raises(ValueError, match=r"bad"):
        await AsyncRetryExecutor(Policy(tries=0), sleep=asleeper).execute(work)

    assert work.await_count == 1
    asleeper.assert_not_called()


@pytest.mark.asyncio
async def test_async_retry_executor_error_then_success(asleeper: AsyncMock) -> None:
    work = AsyncMock(side_effect=["error", {"ok": "success"}])
    policy = Policy(error_predicate=default_error_predicate)

    assert await AsyncRetryExecutor(policy, sleep=asleeper).execute(work) == {"ok": "success"}
    assert work.await_count == 2
    asleeper.assert_awaited_once_with(1000)


@pytest.mark.asyncio
async def test_async_retry_executor_logs_error_value(
    asleeper: AsyncMock, caplog: pytest.LogCaptureFixture
) -> None:
    work = AsyncMock(return_value="error")
    policy = Policy(tries=0, error_predicate=default_error_predicate)

    with caplog.at_level("DEBUG", logger="retryable"):
        assert await AsyncRetryExecutor(policy, sleep=asleeper).execute(work) == "error"

    assert "Returning error value after attempt 1/1: max tries exhausted" in caplog.text
