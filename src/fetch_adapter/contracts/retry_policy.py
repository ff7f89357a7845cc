"""
Retry policy contract for fetch_adapter.
"""
from abc import ABC, abstractmethod


class RetryPolicy(ABC):
    """
    Strategy deciding whether and when a failed request is retried.

    Implementations are stateless; attempt numbers start at 1.
    """

    max_attempts: int
    """Maximum number of attempts, including the first"""

    @abstractmethod
    def backoff_ms(self, attempt: int) -> float:
        """
        Delay before the attempt following ``attempt``.

        Args:
            attempt: The attempt that just failed (starting from 1)

        Returns:
            Delay in milliseconds
        """
        ...

    @abstractmethod
    def retry_on(self, error: BaseException) -> bool:
        """Whether ``error`` is worth another attempt."""
        ...
