"""
Retry policies and the retry executor.
"""
from .policies import ExponentialBackoffPolicy
from .retry_executor import RetryExecutor
from .retry_policies import RetryPolicies

__all__ = [
    "ExponentialBackoffPolicy",
    "RetryExecutor",
    "RetryPolicies",
]
