"""
Exponential backoff retry policy with jitter.
"""
import random
from typing import Optional

from ...contracts.retry_policy import RetryPolicy


# HTTP status codes considered transient
RETRYABLE_STATUS_CODES = frozenset([429, 500, 502, 503, 504])

# Transport code for aborted connections and timeouts
CONNECTION_ABORTED_CODE = "ECONNABORTED"


def _error_status(error: BaseException) -> Optional[int]:
    """Read the HTTP status carried by an error's response, if any."""
    response = getattr(error, "response", None)
    if response is None:
        return None
    status = getattr(response, "status", None)
    if status is None:
        # httpx.HTTPStatusError carries an httpx.Response
        status = getattr(response, "status_code", None)
    return status if isinstance(status, int) else None


class ExponentialBackoffPolicy(RetryPolicy):
    """
    Retry policy with exponential backoff and additive jitter.

    Retries on:
    - 429 (Too Many Requests)
    - 500, 502, 503, 504
    - ECONNABORTED (connection aborted / timed out)

    Every other error is final. Delay for attempt ``n`` is
    ``2**n * base_delay_ms + random(0, jitter_ms)``.
    """

    def __init__(
        self,
        max_attempts: int = 3,
        base_delay_ms: float = 100.0,
        jitter_ms: float = 50.0,
    ):
        if not isinstance(max_attempts, int) or max_attempts < 1:
            raise ValueError("max_attempts must be a positive integer")
        if base_delay_ms < 0 or jitter_ms < 0:
            raise ValueError("base_delay_ms and jitter_ms must be non-negative")
        self.max_attempts = max_attempts
        self.base_delay_ms = base_delay_ms
        self.jitter_ms = jitter_ms

    def retry_on(self, error: BaseException) -> bool:
        if _error_status(error) in RETRYABLE_STATUS_CODES:
            return True
        return getattr(error, "code", None) == CONNECTION_ABORTED_CODE

    def backoff_ms(self, attempt: int) -> float:
        base = (2 ** attempt) * self.base_delay_ms
        jitter = random.random() * self.jitter_ms
        return base + jitter

    def __repr__(self) -> str:
        return (
            f"ExponentialBackoffPolicy(max_attempts={self.max_attempts}, "
            f"base_delay_ms={self.base_delay_ms}, jitter_ms={self.jitter_ms})"
        )
