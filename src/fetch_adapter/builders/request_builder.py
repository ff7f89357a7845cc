"""
Fluent builder for Request objects.
"""
from typing import Any, Dict, Optional, Union

from ..models.request import Request, thaw
from ..models.request_options import RequestOptions
from ..types import HttpBody, HttpBodyValue, HttpMethod


class RequestBuilder:
    """
    Chainable API for assembling a Request.

    ``build()`` snapshots the builder state, so requests already built are
    unaffected by later builder calls.
    """

    def __init__(self, base_url: str):
        self._base_url = base_url
        self._endpoint = ""
        self._method: Union[HttpMethod, str] = HttpMethod.POST
        self._headers: Dict[str, str] = {"Content-Type": "application/json"}
        self._body: Optional[Dict[str, Any]] = {}
        self._query_params: Dict[str, str] = {}
        self._options = RequestOptions()

    def set_endpoint(self, endpoint: str) -> "RequestBuilder":
        """Set the endpoint path, relative to the base URL."""
        self._endpoint = endpoint
        return self

    def set_method(self, method: Union[HttpMethod, str]) -> "RequestBuilder":
        self._method = method
        return self

    # Content type

    def as_json(self) -> "RequestBuilder":
        """Send the body as JSON (default)."""
        self._headers["Content-Type"] = "application/json"
        return self

    def as_xml(self) -> "RequestBuilder":
        self._headers["Content-Type"] = "text/xml"
        return self

    def as_form_url_encoded(self) -> "RequestBuilder":
        """Send the body as URL-encoded form data."""
        self._headers["Content-Type"] = "application/x-www-form-urlencoded"
        return self

    # Body

    def set_body(self, body: Optional[HttpBody]) -> "RequestBuilder":
        """Replace the whole body. None sends no body."""
        self._body = None if body is None else thaw(body)
        return self

    def add_body_param(self, key: str, value: HttpBodyValue) -> "RequestBuilder":
        if self._body is None:
            self._body = {}
        self._body[key] = value
        return self

    def add_body_params(self, params: HttpBody) -> "RequestBuilder":
        """Merge ``params`` into the body. Existing keys are overwritten."""
        self._body = {**(self._body or {}), **thaw(params)}
        return self

    def remove_body_param(self, key: str) -> "RequestBuilder":
        if self._body is not None:
            self._body.pop(key, None)
        return self

    def reset_body_params(self) -> "RequestBuilder":
        self._body = {}
        return self

    # Headers

    def set_headers(self, headers: Dict[str, str]) -> "RequestBuilder":
        """Replace all headers."""
        self._headers = dict(headers)
        return self

    def add_header(self, key: str, value: str) -> "RequestBuilder":
        self._headers[key] = value
        return self

    def add_headers(self, headers: Dict[str, str]) -> "RequestBuilder":
        """Merge headers. Existing keys are overwritten."""
        self._headers = {**self._headers, **headers}
        return self

    def remove_header(self, key: str) -> "RequestBuilder":
        self._headers.pop(key, None)
        return self

    def reset_headers(self) -> "RequestBuilder":
        self._headers = {}
        return self

    # Query parameters

    def set_query_params(self, params: Dict[str, str]) -> "RequestBuilder":
        """Replace all query parameters."""
        self._query_params = dict(params)
        return self

    def add_query_param(self, key: str, value: str) -> "RequestBuilder":
        self._query_params[key] = value
        return self

    def add_query_params(self, params: Dict[str, str]) -> "RequestBuilder":
        """Merge query parameters. Existing keys are overwritten."""
        self._query_params = {**self._query_params, **params}
        return self

    def remove_query_param(self, key: str) -> "RequestBuilder":
        self._query_params.pop(key, None)
        return self

    def reset_query_params(self) -> "RequestBuilder":
        self._query_params = {}
        return self

    # Options

    def set_timeout(self, timeout: Optional[float]) -> "RequestBuilder":
        """Set the request timeout in seconds."""
        self._options = RequestOptions(timeout=timeout)
        return self

    def set_options(self, options: RequestOptions) -> "RequestBuilder":
        self._options = options
        return self

    def build(self) -> Request:
        """Build a new Request from the current state."""
        return Request(
            base_url=self._base_url,
            endpoint=self._endpoint,
            method=self._method,
            headers=self._headers,
            query_params=self._query_params,
            body=self._body,
            options=self._options,
        )
