"""
Resilient async HTTP adapter.

Immutable requests flow through an ordered interceptor chain, an optional
retry policy with exponential backoff, and an httpx-backed transport.
"""
from .types import (
    HttpMethod,
    HttpBody,
    Transport,
    TransportResponse,
)
from .config import Settings, get_settings
from .exceptions import HttpException, ErrorValueException
from .models import Request, RequestOptions, Response, generate_correlation_id
from .builders import RequestBuilder
from .contracts import HttpInterceptor, RetryPolicy
from .resilience import ExponentialBackoffPolicy, RetryExecutor, RetryPolicies
from .core import (
    HttpAdapter,
    HttpxTransport,
    build_url,
    get_default_transport,
    default_validate_status,
)
from .interceptors import (
    LoggingInterceptor,
    HeaderAuthInterceptor,
    BearerAuthInterceptor,
    ApiKeyInterceptor,
    CorrelationIdInterceptor,
)


__all__ = [
    # Types
    "HttpMethod",
    "HttpBody",
    "Transport",
    "TransportResponse",
    # Config
    "Settings",
    "get_settings",
    # Exceptions
    "HttpException",
    "ErrorValueException",
    # Models
    "Request",
    "RequestOptions",
    "Response",
    "generate_correlation_id",
    # Builders
    "RequestBuilder",
    # Contracts
    "HttpInterceptor",
    "RetryPolicy",
    # Resilience
    "ExponentialBackoffPolicy",
    "RetryExecutor",
    "RetryPolicies",
    # Core
    "HttpAdapter",
    "HttpxTransport",
    "build_url",
    "get_default_transport",
    "default_validate_status",
    # Interceptors
    "LoggingInterceptor",
    "HeaderAuthInterceptor",
    "BearerAuthInterceptor",
    "ApiKeyInterceptor",
    "CorrelationIdInterceptor",
]


__version__ = "1.0.0"
