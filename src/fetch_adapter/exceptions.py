"""
Exceptions raised by fetch_adapter.
"""
from typing import Any, Optional


class HttpException(Exception):
    """
    Error raised when an HTTP request fails.

    Covers network failures (no response) and non-success statuses promoted
    by the transport. ``response`` is any object exposing ``status``, usually
    a TransportResponse or Response.
    """

    def __init__(
        self,
        message: str,
        response: Optional[Any] = None,
        code: Optional[str] = None,
    ):
        super().__init__(message)
        self.message = message
        self.response = response
        self.code = code

    @property
    def status(self) -> Optional[int]:
        """HTTP status of the attached response, if any."""
        if self.response is None:
            return None
        return getattr(self.response, "status", None)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(message={self.message!r}, "
            f"status={self.status!r}, code={self.code!r})"
        )


class ErrorValueException(HttpException):
    """Wraps a non-exception value returned by an interceptor's on_error hook."""

    def __init__(self, value: Any):
        super().__init__(f"Interceptor returned a non-exception error value: {value!r}")
        self.value = value
