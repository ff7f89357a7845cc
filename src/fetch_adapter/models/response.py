"""
Immutable HTTP response model.
"""
from dataclasses import dataclass, field
from datetime import datetime
from types import MappingProxyType
from typing import Any, Dict, Generic, Mapping, Optional, TypeVar

from .request import utcnow


T = TypeVar("T")


@dataclass(frozen=True)
class Response(Generic[T]):
    """
    Immutable HTTP response.

    ``headers`` is None when the transport supplied no headers, which is
    distinct from an empty mapping.
    """

    data: T
    status: int
    headers: Optional[Mapping[str, str]]
    system_correlation_id: str
    timestamp: datetime = field(default_factory=utcnow, compare=False)

    def __post_init__(self):
        if self.headers is not None:
            object.__setattr__(self, "headers", MappingProxyType(dict(self.headers)))

    @classmethod
    def create(
        cls,
        data: T,
        status: int,
        headers: Optional[Mapping[str, str]],
        system_correlation_id: str,
    ) -> "Response[T]":
        """Create a new Response."""
        return cls(data, status, headers, system_correlation_id)

    @property
    def ok(self) -> bool:
        """Whether the status is 2xx."""
        return 200 <= self.status < 300

    def to_debug_object(self) -> Dict[str, Any]:
        """Plain-dict snapshot of the response, suitable for logging."""
        return {
            "data": self.data,
            "status": self.status,
            "headers": None if self.headers is None else dict(self.headers),
        }
