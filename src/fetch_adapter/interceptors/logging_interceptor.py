"""
Interceptor logging every request, response and error.
"""
import logging
from typing import Dict, Mapping, Optional

from ..config import get_settings
from ..contracts.interceptor import HttpInterceptor
from ..core.url import build_url
from ..models.request import Request
from ..models.response import Response

SENSITIVE_HEADERS = ("authorization", "x-api-key")


def mask_value(val: Optional[str], visible_chars: Optional[int] = None) -> str:
    """Mask sensitive value for logging, showing the first few chars."""
    if visible_chars is None:
        visible_chars = get_settings().LOG_MASK_VISIBLE_CHARS
    if not val:
        return "<empty>"
    if len(val) <= visible_chars:
        return "*" * len(val)
    return val[:visible_chars] + "*" * (len(val) - visible_chars)


def mask_headers(headers: Mapping[str, str]) -> Dict[str, str]:
    """Mask authorization headers for safe logging."""
    masked = dict(headers)
    for key in masked:
        if key.lower() in SENSITIVE_HEADERS:
            masked[key] = mask_value(masked[key])
    return masked


class LoggingInterceptor(HttpInterceptor):
    """Logs the request lifecycle. Passes every value through unchanged."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        self._logger = logger or logging.getLogger("fetch_adapter.interceptors.logging")

    async def on_request(self, request: Request) -> Request:
        url = build_url(request.base_url, request.endpoint, request.query_params)
        self._logger.info(
            f"--> {request.method.value} {url} "
            f"correlation_id={request.system_correlation_id}"
        )
        self._logger.debug(f"--> headers={mask_headers(request.headers)}")
        return request

    async def on_response(self, response: Response) -> Response:
        self._logger.info(
            f"<-- {response.status} correlation_id={response.system_correlation_id}"
        )
        return response

    async def on_error(self, error: BaseException, request: Request) -> BaseException:
        url = build_url(request.base_url, request.endpoint, request.query_params)
        self._logger.error(
            f"<-- {request.method.value} {url} failed: {error!r} "
            f"correlation_id={request.system_correlation_id}"
        )
        return error
