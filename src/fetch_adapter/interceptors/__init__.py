"""
Built-in interceptors.
"""
from .logging_interceptor import LoggingInterceptor, mask_headers, mask_value
from .auth_interceptor import HeaderAuthInterceptor, BearerAuthInterceptor, ApiKeyInterceptor
from .correlation_interceptor import CorrelationIdInterceptor

__all__ = [
    "LoggingInterceptor",
    "mask_headers",
    "mask_value",
    "HeaderAuthInterceptor",
    "BearerAuthInterceptor",
    "ApiKeyInterceptor",
    "CorrelationIdInterceptor",
]
