"""
Per-request configuration options.
"""
from dataclasses import dataclass, field
from typing import Optional

from ..config import get_settings


def _default_timeout() -> float:
    return get_settings().DEFAULT_TIMEOUT_SECONDS


@dataclass(frozen=True)
class RequestOptions:
    """Options applied to a single request."""

    timeout: Optional[float] = field(default_factory=_default_timeout)
    """Connect/read timeout in seconds. None lets the transport decide."""
