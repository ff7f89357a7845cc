"""
Default network transport backed by httpx.
"""
import asyncio
import logging
from functools import lru_cache
from typing import Any, Callable, Dict, Optional, Tuple

import httpx

from ..config import get_settings
from ..exceptions import HttpException
from ..resilience.policies.exponential_backoff import CONNECTION_ABORTED_CODE
from ..types import TransportResponse

logger = logging.getLogger("fetch_adapter.transport")

NETWORK_ERROR_CODE = "ERR_NETWORK"
BAD_REQUEST_CODE = "ERR_BAD_REQUEST"
BAD_RESPONSE_CODE = "ERR_BAD_RESPONSE"

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


def default_validate_status(status: int) -> bool:
    """Accept 2xx statuses only."""
    return 200 <= status < 300


def _status_error_code(status: int) -> Optional[str]:
    if 400 <= status < 500:
        return BAD_REQUEST_CODE
    if 500 <= status < 600:
        return BAD_RESPONSE_CODE
    return None


def _is_form(headers: Dict[str, str]) -> bool:
    for key, value in headers.items():
        if key.lower() == "content-type":
            return value.lower().startswith(FORM_CONTENT_TYPE)
    return False


def _decode_body(response: httpx.Response) -> Any:
    """Decode JSON, falling back to text. Empty bodies decode to None."""
    text = response.text
    if not text:
        return None
    try:
        return response.json()
    except ValueError:
        return text


class HttpxTransport:
    """
    Transport issuing requests through an httpx.AsyncClient.

    Statuses rejected by ``validate_status`` are raised as HttpException with
    the TransportResponse attached, so retry policies can inspect them.

    An injected ``client`` is used as-is. Without one, the transport creates
    its own client lazily and replaces it whenever it is used from a different
    event loop, since pooled connections are bound to the loop that opened
    them.
    """

    def __init__(
        self,
        client: Optional[httpx.AsyncClient] = None,
        validate_status: Optional[Callable[[int], bool]] = None,
    ):
        self._client = client
        self._owned: Optional[Tuple[asyncio.AbstractEventLoop, httpx.AsyncClient]] = None
        self._validate_status = validate_status or default_validate_status
        self._closed = False

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is not None:
            return self._client

        loop = asyncio.get_running_loop()
        if self._owned is not None:
            owner, client = self._owned
            if owner is loop and not client.is_closed:
                return client
            logger.debug("HttpxTransport._get_client: event loop changed, creating new client")

        client = httpx.AsyncClient(
            timeout=httpx.Timeout(get_settings().DEFAULT_TIMEOUT_SECONDS),
        )
        self._owned = (loop, client)
        return client

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
        if self._closed:
            raise RuntimeError("Transport has been closed")

        payload: Dict[str, Any] = {}
        if body is not None:
            payload["data" if _is_form(headers) else "json"] = body
        if timeout is not None:
            payload["timeout"] = timeout

        logger.debug(f"HttpxTransport.request: method={method}, url={url}, timeout={timeout}")

        try:
            response = await self._get_client().request(
                method=method,
                url=url,
                headers=headers,
                **payload,
            )
        except httpx.TimeoutException as exc:
            raise HttpException(
                f"timeout of {timeout}s exceeded", code=CONNECTION_ABORTED_CODE
            ) from exc
        except httpx.TransportError as exc:
            raise HttpException(f"Network error: {exc}", code=NETWORK_ERROR_CODE) from exc

        result = TransportResponse(
            data=_decode_body(response),
            status=response.status_code,
            headers=dict(response.headers),
        )
        logger.debug(f"HttpxTransport.request: status={result.status}, url={url}")

        if not self._validate_status(result.status):
            raise HttpException(
                f"Request failed with status code {result.status}",
                response=result,
                code=_status_error_code(result.status),
            )

        return result

    async def aclose(self) -> None:
        """Close the underlying client."""
        self._closed = True
        if self._client is not None:
            await self._client.aclose()
        elif self._owned is not None:
            owner, client = self._owned
            self._owned = None
            # A client opened on another loop cannot be awaited from this one
            if owner is asyncio.get_running_loop():
                await client.aclose()

        if get_default_transport.cache_info().currsize and get_default_transport() is self:
            get_default_transport.cache_clear()

    async def __aenter__(self) -> "HttpxTransport":
        """Enter async context manager."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Exit async context manager."""
        await self.aclose()


@lru_cache()
def get_default_transport() -> HttpxTransport:
    """
    Get the shared default transport.

    Closing it clears this cache, so the next call returns a fresh transport.
    """
    return HttpxTransport()
