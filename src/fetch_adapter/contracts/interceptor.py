"""
Interceptor contract for fetch_adapter.
"""
from abc import ABC, abstractmethod

from ..models.request import Request
from ..models.response import Response


class HttpInterceptor(ABC):
    """
    Hook invoked at fixed points of every dispatch attempt.

    Interceptors run in registration order for all three hooks. Hooks may be
    invoked several times per logical request when a retry policy is
    configured, so request mutations should be idempotent (set a header,
    never append to one).
    """

    @abstractmethod
    async def on_request(self, request: Request) -> Request:
        """
        Intercept an outgoing request before it is sent.

        Args:
            request: The request produced by the previous interceptor

        Returns:
            The request to pass downstream (the same or a new instance)
        """
        ...

    @abstractmethod
    async def on_response(self, response: Response) -> Response:
        """
        Intercept a response before it reaches the caller.

        Args:
            response: The response produced by the previous interceptor

        Returns:
            The response to pass downstream
        """
        ...

    @abstractmethod
    async def on_error(self, error: BaseException, request: Request) -> BaseException:
        """
        Observe or replace an error raised during the attempt.

        Raising from this hook ends the error chain with the raised exception.

        Args:
            error: The current error value
            request: The request that was in flight

        Returns:
            The error to pass downstream (the same or a replacement)
        """
        ...
