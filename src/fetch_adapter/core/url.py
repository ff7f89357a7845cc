"""
URL construction for fetch_adapter.
"""
from typing import Mapping, Optional
from urllib.parse import urlencode, urljoin


def build_url(
    base_url: str,
    endpoint: str,
    query: Optional[Mapping[str, str]] = None,
) -> str:
    """
    Build the target URL from base, endpoint and query parameters.

    The endpoint is resolved against the base URL using RFC 3986 rules, so
    ``https://h/v1`` + ``/users`` and ``https://h/v1`` + ``users`` both give
    ``https://h/users``, while ``https://h/v1/`` + ``users`` gives
    ``https://h/v1/users``. An empty endpoint leaves the base URL unchanged.
    """
    url = urljoin(base_url, endpoint) if endpoint else base_url

    if query:
        query_str = urlencode({k: str(v) for k, v in query.items()})
        separator = "&" if "?" in url else "?"
        url = f"{url}{separator}{query_str}"

    return url
