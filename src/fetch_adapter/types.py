"""
Type definitions for fetch_adapter.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Mapping, Optional, Protocol, Union


class HttpMethod(str, Enum):
    """Standard HTTP methods used in RESTful API communication."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"
    PATCH = "PATCH"
    HEAD = "HEAD"
    OPTIONS = "OPTIONS"


# JSON-like request payload: primitives, None, or nested mappings
HttpBodyValue = Union[str, int, float, bool, None, Mapping[str, Any]]
HttpBody = Mapping[str, HttpBodyValue]


@dataclass(frozen=True)
class TransportResponse:
    """Raw result of a transport call."""

    data: Any
    """Decoded response body"""

    status: int
    """HTTP status code"""

    headers: Optional[Dict[str, str]] = None
    """Response headers, or None when the transport supplied none"""


class Transport(Protocol):
    """Network transport consumed by the adapter."""

    async def request(
        self,
        *,
        url: str,
        method: str,
        body: Optional[Dict[str, Any]],
        headers: Dict[str, str],
        timeout: Optional[float],
    ) -> TransportResponse:
        """Issue a single HTTP request."""
        ...
