import pytest
from typing import AsyncGenerator
from httpx import AsyncClient, ASGITransport

from webfinger_proxy.core.config import get_settings

PROXY_ENV_VARS = ("DOMAIN", "APPLICATION_SLUG", "PORT", "HOST", "LOG_LEVEL", "DEBUG")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Start every test from the built-in defaults."""
    for name in PROXY_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
async def ac() -> AsyncGenerator[AsyncClient, None]:
    """Async client fixture for testing API endpoints."""
    from webfinger_proxy.main import app
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
