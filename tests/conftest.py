"""
Shared fixtures for fetch_adapter tests.
"""
import pytest
from unittest.mock import AsyncMock, MagicMock, patch

from fetch_adapter.config import get_settings
from fetch_adapter.core.transport import get_default_transport
from fetch_adapter.contracts.interceptor import HttpInterceptor
from fetch_adapter.models.request import Request
from fetch_adapter.types import HttpMethod, TransportResponse


class RecordingInterceptor(HttpInterceptor):
    """Interceptor appending ``<name>:<hook>`` to a shared log."""

    def __init__(self, name, log):
        self.name = name
        self.log = log

    async def on_request(self, request):
        self.log.append(f"{self.name}:request")
        return request

    async def on_response(self, response):
        self.log.append(f"{self.name}:response")
        return response

    async def on_error(self, error, request):
        self.log.append(f"{self.name}:error")
        return error


@pytest.fixture(autouse=True)
def clear_caches():
    """Reset cached settings and the default transport around every test."""
    get_settings.cache_clear()
    get_default_transport.cache_clear()
    yield
    get_settings.cache_clear()
    get_default_transport.cache_clear()


@pytest.fixture
def sample_request():
    """Sample GET request for testing."""
    return Request("https://api.example.com", "/test", HttpMethod.GET)


@pytest.fixture
def transport_response():
    """Successful transport response."""
    return TransportResponse(data={"success": True}, status=200, headers={})


@pytest.fixture
def mock_transport(transport_response):
    """Mock transport returning ``transport_response``."""
    transport = MagicMock()
    transport.request = AsyncMock(return_value=transport_response)
    return transport


@pytest.fixture
def call_log():
    return []


@pytest.fixture
def no_sleep():
    """Patch the executor sleep so backoff does not slow tests down."""
    with patch(
        "fetch_adapter.resilience.retry_executor.async_sleep", new_callable=AsyncMock
    ) as sleep:
        yield sleep
