"""
Interceptor propagating the correlation id to the server.
"""
from ..contracts.interceptor import HttpInterceptor
from ..models.request import Request
from ..models.response import Response


class CorrelationIdInterceptor(HttpInterceptor):
    """Copies ``system_correlation_id`` into a request header."""

    def __init__(self, header_name: str = "X-Correlation-ID"):
        self._header_name = header_name

    async def on_request(self, request: Request) -> Request:
        return request.with_header(self._header_name, request.system_correlation_id)

    async def on_response(self, response: Response) -> Response:
        return response

    async def on_error(self, error: BaseException, request: Request) -> BaseException:
        return error
