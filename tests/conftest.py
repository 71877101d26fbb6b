"""
Shared fixtures for the API tests.

Every test gets a fresh in-memory SQLite database wired in through the
``get_db`` dependency, and upstream credentials are cleared so nothing
reaches the network by accident.
"""

import httpx
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from fittrack.core.settings import settings
from fittrack.database import Base, get_db
from fittrack.main import app
from fittrack.services import cache_service
from fittrack.services.http_client import get_http_client


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Reset upstream settings to a known, offline state."""
    monkeypatch.setattr(settings, "GROK_API_KEY", None)
    monkeypatch.setattr(settings, "RAPIDAPI_KEY", None)
    monkeypatch.setattr(settings, "AI_MASK_FORBIDDEN", True)
    monkeypatch.setattr(cache_service, "_REDIS", None)
    yield
    app.dependency_overrides.clear()


@pytest.fixture
def session_factory():
    """Session factory bound to a throwaway in-memory database."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    factory = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    yield factory
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def client(session_factory):
    """Test client using the in-memory database."""
    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    return TestClient(app)


@pytest.fixture
def make_client(client):
    """Factory for extra clients with their own cookie jars."""
    def _make():
        return TestClient(app)
    return _make


def register(client, name="Alex", email="alex@example.com", password="secret123"):
    return client.post("/api/users", json={"name": name, "email": email, "password": password})


@pytest.fixture
def register_user():
    """The registration call as a helper."""
    return register


@pytest.fixture
def auth_client(client):
    """Client holding the auth cookie of a freshly registered user."""
    response = register(client)
    assert response.status_code == 201
    return client


class UpstreamRecorder:
    """MockTransport handler that records requested URLs."""

    def __init__(self, responder):
        self.responder = responder
        self.requests = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.responder(request)

    @property
    def slugs(self):
        return [r.url.path.rsplit("/", 1)[-1].removesuffix(".gif") for r in self.requests]


@pytest.fixture
def upstream():
    """Install a mocked HTTP client for the image and exercise proxies."""
    def _install(responder):
        recorder = UpstreamRecorder(responder)

        async def override_http_client():
            async with httpx.AsyncClient(transport=httpx.MockTransport(recorder)) as http_client:
                yield http_client

        app.dependency_overrides[get_http_client] = override_http_client
        return recorder
    return _install
