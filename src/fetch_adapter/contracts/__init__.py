"""
Extension contracts: interceptors and retry policies.
"""
from .interceptor import HttpInterceptor
from .retry_policy import RetryPolicy

__all__ = [
    "HttpInterceptor",
    "RetryPolicy",
]
