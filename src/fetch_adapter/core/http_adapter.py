"""
Core HTTP adapter orchestrating interceptors, retries and the transport.
"""
import logging
from typing import Any, Optional, Sequence

from ..contracts.interceptor import HttpInterceptor
from ..contracts.retry_policy import RetryPolicy
from ..exceptions import ErrorValueException
from ..models.request import Request, utcnow
from ..models.response import Response
from ..resilience.retry_executor import RetryExecutor
from ..types import Transport
from .transport import get_default_transport
from .url import build_url

logger = logging.getLogger("fetch_adapter.http_adapter")


class HttpAdapter:
    """
    Resilient HTTP client wrapper.

    Every dispatch attempt runs the request hooks, the transport call, and
    then either the response hooks or the error hooks. All three chains run
    in registration order. With a retry policy, each retry is a brand-new
    attempt, request hooks included.

    Configuration is read-only after construction; independent ``send``
    calls may run concurrently.
    """

    def __init__(
        self,
        interceptors: Sequence[HttpInterceptor],
        transport: Transport,
        retry_policy: Optional[RetryPolicy] = None,
    ):
        self._interceptors = tuple(interceptors)
        self._transport = transport
        self._retry_policy = retry_policy

    @classmethod
    def create(
        cls,
        interceptors: Sequence[HttpInterceptor],
        retry_policy: Optional[RetryPolicy] = None,
        transport: Optional[Transport] = None,
    ) -> "HttpAdapter":
        """
        Create a configured HttpAdapter.

        Args:
            interceptors: Interceptors in the order they should run
            retry_policy: Optional resiliency policy; without one nothing is retried
            transport: Optional transport (defaults to the shared HttpxTransport)

        Returns:
            A new HttpAdapter
        """
        return cls(
            interceptors,
            transport if transport is not None else get_default_transport(),
            retry_policy,
        )

    @property
    def interceptors(self) -> Sequence[HttpInterceptor]:
        return self._interceptors

    @property
    def retry_policy(self) -> Optional[RetryPolicy]:
        return self._retry_policy

    async def send(self, request: Request) -> Response[Any]:
        """
        Send a request through the interceptor chain and the retry policy.

        Args:
            request: The fully-populated request

        Returns:
            The response after every on_response hook

        Raises:
            The final error after on_error hooks, once retries are exhausted
            or refused, or the error raised by an interceptor
        """
        if self._retry_policy is None:
            return await self._dispatch(request)

        executor = RetryExecutor(self._retry_policy)
        return await executor.execute(lambda: self._dispatch(request))

    async def _dispatch(self, request: Request) -> Response[Any]:
        """Run one full dispatch attempt."""
        processed = request

        for interceptor in self._interceptors:
            processed = await interceptor.on_request(processed)

        try:
            url = build_url(processed.base_url, processed.endpoint, processed.query_params)
            processed = processed.with_timestamp(utcnow())

            logger.debug(
                f"HttpAdapter._dispatch: method={processed.method.value}, url={url}, "
                f"correlation_id={processed.system_correlation_id}"
            )

            result = await self._transport.request(
                url=url,
                method=processed.method.value,
                body=processed.body_dict(),
                headers=dict(processed.headers),
                timeout=processed.options.timeout if processed.options else None,
            )

            response: Response[Any] = Response.create(
                result.data,
                result.status,
                getattr(result, "headers", None),
                processed.system_correlation_id,
            )

            for interceptor in self._interceptors:
                response = await interceptor.on_response(response)

            return response
        except Exception as error:
            propagated: Any = error

            for interceptor in self._interceptors:
                propagated = await interceptor.on_error(propagated, processed)

            logger.debug(
                f"HttpAdapter._dispatch: attempt failed, correlation_id="
                f"{processed.system_correlation_id}, error={propagated!r}"
            )

            if not isinstance(propagated, BaseException):
                raise ErrorValueException(propagated) from error
            if propagated is error:
                raise
            raise propagated
