"""
Shared pytest fixtures.

The app is exercised through Starlette's TestClient without running the
lifespan, so no database pool is opened. Repository functions are replaced
with async fakes per test.
"""

from uuid import uuid4

import pytest
from starlette.testclient import TestClient

from main import app


@pytest.fixture(autouse=True)
def open_api(monkeypatch):
    """Admin routes run without bearer-token checks unless a test enables them."""
    monkeypatch.delenv("AUTH_JWT_SECRET", raising=False)
    monkeypatch.delenv("FRONTEND_DIST_PATH", raising=False)


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def returns():
    """Build an async fake that records its calls and returns `value`."""
    def _factory(value=None):
        calls = []

        async def _fake(*args, **kwargs):
            calls.append((args, kwargs))
            return value

        _fake.calls = calls
        return _fake

    return _factory


@pytest.fixture
def raises():
    """Build an async fake that raises `exc`."""
    def _factory(exc):
        async def _fake(*args, **kwargs):
            raise exc

        return _fake

    return _factory


@pytest.fixture
def client_row():
    return {
        "id": uuid4(),
        "name": "Acme Bakery",
        "website": "https://acme.example",
        "status": "active",
        "n8n_webhook_url": "https://n8n.example/webhook/acme",
        "competitor_instagram_urls": [],
        "competitor_tiktok_urls": [],
        "created_at": "2026-01-05T10:00:00+00:00",
        "updated_at": "2026-01-05T10:00:00+00:00",
    }
