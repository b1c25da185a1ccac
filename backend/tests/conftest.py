"""
Shared fixtures for the test suite.

Key design decisions:
- The FastAPI app is exercised in-process (TestClient / ASGITransport).
- Uses respx to mock chat backend calls for client-only tests.
- Simulated latency is switched off unless a test asks for it.
"""
import httpx
import pytest
import pytest_asyncio
import respx
from fastapi.testclient import TestClient

from app.client.api import ChatClient
from app.main import app

BASE_URL = "http://chat.test"


@pytest.fixture(autouse=True)
def no_latency(monkeypatch):
    """Skip the simulated delay so tests stay fast."""
    monkeypatch.setenv("RESPONSE_DELAY_MS", "0")


@pytest.fixture
def client():
    return TestClient(app)


# ── respx mock setup ──


@pytest.fixture
def mock_backend():
    """Intercept HTTP calls to the chat backend."""
    with respx.mock(base_url=BASE_URL, assert_all_called=False) as router:
        yield router


@pytest_asyncio.fixture
async def chat_client():
    """ChatClient pointed at the respx-mocked backend."""
    api = ChatClient(base_url=BASE_URL)
    yield api
    await api.close()


@pytest_asyncio.fixture
async def asgi_chat_client():
    """ChatClient wired straight to the FastAPI app, no network."""
    transport = httpx.ASGITransport(app=app)
    http = httpx.AsyncClient(transport=transport, base_url=BASE_URL)
    api = ChatClient(base_url=BASE_URL, client=http)
    yield api
    await api.close()
