"""
Interceptors attaching authentication headers.
"""
import logging
from typing import Callable, Optional, Union

from ..contracts.interceptor import HttpInterceptor
from ..models.request import Request
from ..models.response import Response
from .logging_interceptor import mask_value

logger = logging.getLogger("fetch_adapter.interceptors.auth")

# Static value, or a callable resolving one per request
TokenSource = Union[str, Callable[[Request], Optional[str]]]


class HeaderAuthInterceptor(HttpInterceptor):
    """
    Sets a single auth header on every outgoing request.

    The header is set, never appended, so the hook is safe to repeat on
    retries. Requests are left untouched when no key resolves.
    """

    def __init__(self, header_name: str, api_key: TokenSource, prefix: str = ""):
        self._header_name = header_name
        self._api_key = api_key
        self._prefix = prefix

    def _resolve(self, request: Request) -> Optional[str]:
        if callable(self._api_key):
            return self._api_key(request)
        return self._api_key

    async def on_request(self, request: Request) -> Request:
        key = self._resolve(request)
        if not key:
            logger.debug(f"{type(self).__name__}.on_request: no key resolved, skipping")
            return request
        value = f"{self._prefix}{key}"
        logger.debug(
            f"{type(self).__name__}.on_request: {self._header_name}={mask_value(value)}"
        )
        return request.with_header(self._header_name, value)

    async def on_response(self, response: Response) -> Response:
        return response

    async def on_error(self, error: BaseException, request: Request) -> BaseException:
        return error


class BearerAuthInterceptor(HeaderAuthInterceptor):
    """Bearer token auth: ``Authorization: Bearer <token>``."""

    def __init__(self, token: TokenSource):
        super().__init__("Authorization", token, prefix="Bearer ")


class ApiKeyInterceptor(HeaderAuthInterceptor):
    """API key in a custom header (``x-api-key`` by default)."""

    def __init__(self, api_key: TokenSource, header_name: str = "x-api-key"):
        super().__init__(header_name, api_key)
