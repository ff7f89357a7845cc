from .exponential_backoff import (
    ExponentialBackoffPolicy,
    RETRYABLE_STATUS_CODES,
    CONNECTION_ABORTED_CODE,
)

__all__ = [
    "ExponentialBackoffPolicy",
    "RETRYABLE_STATUS_CODES",
    "CONNECTION_ABORTED_CODE",
]
