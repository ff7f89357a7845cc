"""
Factory for the standard retry policies.
"""
from typing import Optional

from ..config import get_settings
from .policies.exponential_backoff import ExponentialBackoffPolicy


class RetryPolicies:
    """Shortcuts for building common retry policies."""

    @staticmethod
    def exponential(attempts: Optional[int] = None) -> ExponentialBackoffPolicy:
        """
        Create an exponential backoff policy.

        Args:
            attempts: Maximum attempts. Defaults to FETCH_ADAPTER_RETRY_MAX_ATTEMPTS (3).

        Returns:
            A new ExponentialBackoffPolicy
        """
        settings = get_settings()
        return ExponentialBackoffPolicy(
            max_attempts=attempts if attempts is not None else settings.RETRY_MAX_ATTEMPTS,
            base_delay_ms=settings.RETRY_BASE_DELAY_MS,
            jitter_ms=settings.RETRY_JITTER_MS,
        )
