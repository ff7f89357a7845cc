"""
Retry executor driven by a RetryPolicy.
"""
import asyncio
import logging
from typing import Awaitable, Callable, TypeVar

from ..contracts.retry_policy import RetryPolicy


T = TypeVar("T")

logger = logging.getLogger("fetch_adapter.retry_executor")


async def async_sleep(seconds: float) -> None:
    """
    Sleep for a specified duration (async).

    Args:
        seconds: Duration in seconds
    """
    await asyncio.sleep(seconds)


class RetryExecutor:
    """
    Retry Executor

    Runs an async operation, delegating the retry decision and the backoff
    timing to the injected policy. Performs at most ``policy.max_attempts``
    invocations; each invocation starts from scratch.
    """

    def __init__(self, policy: RetryPolicy):
        self._policy = policy

    @property
    def policy(self) -> RetryPolicy:
        """Get the retry policy."""
        return self._policy

    async def execute(self, operation: Callable[[], Awaitable[T]]) -> T:
        """
        Execute an operation with retry logic.

        Args:
            operation: Zero-argument async function to execute

        Returns:
            The result of the first successful invocation

        Raises:
            The last error when the policy refuses a retry or attempts run out

        Example:
            executor = RetryExecutor(RetryPolicies.exponential())
            user = await executor.execute(lambda: fetch_user(user_id))
        """
        attempt = 1

        while True:
            try:
                return await operation()
            except Exception as error:
                if not self._policy.retry_on(error):
                    logger.debug(f"RetryExecutor: attempt {attempt} failed with non-retryable {error!r}")
                    raise

                if attempt >= self._policy.max_attempts:
                    logger.warning(
                        f"RetryExecutor: giving up after {attempt} attempts, last error={error!r}"
                    )
                    raise

                delay_ms = self._policy.backoff_ms(attempt)
                logger.warning(
                    f"RetryExecutor: attempt {attempt}/{self._policy.max_attempts} failed "
                    f"with {error!r}, retrying in {delay_ms:.0f}ms"
                )
                await async_sleep(delay_ms / 1000)
                attempt += 1
