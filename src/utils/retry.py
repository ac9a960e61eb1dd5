"""Caller-side retry policy for transient oracle failures."""

from collections.abc import Awaitable, Callable
from typing import TYPE_CHECKING, TypeVar

from loguru import logger
from tenacity import (
    AsyncRetrying,
    RetryCallState,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from src.errors import OracleUnavailableError

if TYPE_CHECKING:
    from src.models.config import RetryConfig

T = TypeVar("T")


def _log_retry(retry_state: RetryCallState) -> None:
    exc = retry_state.outcome.exception() if retry_state.outcome else None
    logger.warning(f"Oracle unavailable (attempt {retry_state.attempt_number}), retrying: {exc}")


async def call_with_retry(
    func: Callable[[], Awaitable[T]],
    config: "RetryConfig",
) -> T:
    """
    Await func, retrying only on OracleUnavailableError.

    Other errors (invalid format, exhausted resolution) are terminal and
    propagate immediately.

    Args:
        func: Zero-argument coroutine factory
        config: Retry configuration

    Returns:
        Result of the first successful call

    Raises:
        OracleUnavailableError: If every attempt failed
    """
    async for attempt in AsyncRetrying(
        stop=stop_after_attempt(config.attempts),
        wait=wait_exponential(min=config.min_wait_seconds, max=config.max_wait_seconds),
        retry=retry_if_exception_type(OracleUnavailableError),
        before_sleep=_log_retry,
        reraise=True,
    ):
        with attempt:
            result = await func()

    return result
