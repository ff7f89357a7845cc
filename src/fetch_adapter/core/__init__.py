"""
Core dispatch components for fetch_adapter.
"""
from .url import build_url
from .transport import HttpxTransport, get_default_transport, default_validate_status
from .http_adapter import HttpAdapter

__all__ = [
    "build_url",
    "HttpxTransport",
    "get_default_transport",
    "default_validate_status",
    "HttpAdapter",
]
