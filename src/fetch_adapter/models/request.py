"""
Immutable HTTP request model.
"""
import uuid
from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Union

from ..types import HttpBody, HttpBodyValue, HttpMethod
from .request_options import RequestOptions


def generate_correlation_id() -> str:
    """Generate a random correlation id for tracing."""
    return str(uuid.uuid4())


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def freeze(value: Any) -> Any:
    """Recursively copy mappings into read-only views and sequences into tuples."""
    if isinstance(value, Mapping):
        return MappingProxyType({key: freeze(item) for key, item in value.items()})
    if isinstance(value, (list, tuple)):
        return tuple(freeze(item) for item in value)
    return value


def thaw(value: Any) -> Any:
    """Recursively copy mappings into plain dicts and sequences into lists."""
    if isinstance(value, Mapping):
        return {key: thaw(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [thaw(item) for item in value]
    return value


@dataclass(frozen=True)
class Request:
    """
    Immutable HTTP request.

    Header, query and body mappings are stored as read-only views over
    private copies. The body is frozen all the way down. The ``with_*`` helpers return a new Request that keeps
    the same ``system_correlation_id``.
    """

    base_url: str
    endpoint: str
    method: Union[HttpMethod, str] = HttpMethod.POST
    headers: Mapping[str, str] = field(default_factory=dict)
    query_params: Mapping[str, str] = field(default_factory=dict)
    body: Optional[HttpBody] = None
    options: RequestOptions = field(default_factory=RequestOptions)
    system_correlation_id: str = field(default_factory=generate_correlation_id)
    timestamp: datetime = field(default_factory=utcnow, compare=False)

    def __post_init__(self):
        method = self.method.upper() if isinstance(self.method, str) else self.method
        object.__setattr__(self, "method", HttpMethod(method))
        object.__setattr__(self, "headers", MappingProxyType(dict(self.headers or {})))
        object.__setattr__(
            self, "query_params", MappingProxyType(dict(self.query_params or {}))
        )
        if self.body is not None:
            object.__setattr__(self, "body", freeze(self.body))

    def with_header(self, key: str, value: str) -> "Request":
        """Return a copy with the header set."""
        return replace(self, headers={**self.headers, key: value})

    def with_headers(self, headers: Mapping[str, str]) -> "Request":
        """Return a copy with the headers merged in. Existing keys are overwritten."""
        return replace(self, headers={**self.headers, **headers})

    def with_query_param(self, key: str, value: str) -> "Request":
        """Return a copy with the query parameter set."""
        return replace(self, query_params={**self.query_params, key: value})

    def with_param(self, key: str, value: HttpBodyValue) -> "Request":
        """Return a copy with the body parameter set."""
        if self.body is None:
            raise ValueError("Body is not defined")
        return replace(self, body={**self.body, key: value})

    def with_timestamp(self, timestamp: datetime) -> "Request":
        """Return a copy stamped with ``timestamp``."""
        return replace(self, timestamp=timestamp)

    def body_dict(self) -> Optional[Dict[str, Any]]:
        """Body as a mutable deep copy, or None."""
        return None if self.body is None else thaw(self.body)

    def to_debug_object(self) -> Dict[str, Any]:
        """Plain-dict snapshot of the request, suitable for logging."""
        return {
            "base_url": self.base_url,
            "endpoint": self.endpoint,
            "method": self.method.value,
            "headers": dict(self.headers),
            "query_params": dict(self.query_params),
            "body": self.body_dict(),
        }
