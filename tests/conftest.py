"""
Pytest configuration and fixtures for the currency converter.

The upstream exchange API is replaced by an httpx MockTransport so no test
touches the network.
"""

import httpx
import pytest
from fastapi.testclient import TestClient

from currency_converter.core.config import Settings, get_settings
from currency_converter.main import create_app
from currency_converter.services.rates.providers import RapidAPIRateProvider


class UpstreamStub:
    """Records outbound requests and answers with a fixed body or error."""

    def __init__(self, body=0.9, status_code=200, error=None, raw=None):
        self.body = body
        self.status_code = status_code
        self.error = error
        self.raw = raw
        self.requests = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error(f"stubbed failure for {request.url}", request=request)
        if self.raw is not None:
            return httpx.Response(self.status_code, content=self.raw)
        return httpx.Response(self.status_code, json=self.body)


@pytest.fixture
def settings():
    """Settings isolated from the process environment and any local .env"""
    return Settings(
        _env_file=None,
        rapid_currency_key="test-key",
        rapid_currency_host="currency-exchange.p.rapidapi.com",
    )


@pytest.fixture
def make_provider(settings):
    def _make(stub, **overrides):
        s = settings.model_copy(update=overrides) if overrides else settings
        client = httpx.Client(transport=httpx.MockTransport(stub))
        return RapidAPIRateProvider(s, client=client)

    return _make


@pytest.fixture
def make_client(settings, make_provider):
    """Build a TestClient whose upstream is answered by ``stub``"""

    def _make(stub, **overrides):
        s = settings.model_copy(update=overrides) if overrides else settings
        app = create_app(settings_override=s, rate_provider=make_provider(stub, **overrides))
        return TestClient(app)

    return _make


@pytest.fixture
def upstream():
    return UpstreamStub()


@pytest.fixture
def client(make_client, upstream):
    return make_client(upstream)


@pytest.fixture(autouse=True)
def clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
