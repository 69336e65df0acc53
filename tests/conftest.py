"""Pytest configuration and fixtures for taskdesk.

Uses app.main:app for HTTP tests. Platform credentials are cleared and
notifications disabled before the app is imported so nothing reaches the
network; tests that need a configured platform override the FastAPI
dependencies or set env through the configured_env fixture.
"""

import os

os.environ["SUPABASE_URL"] = ""
os.environ["SUPABASE_SERVICE_ROLE_KEY"] = ""
os.environ["SUPABASE_ANON_KEY"] = ""
os.environ.setdefault("NOTIFICATION_BACKEND", "none")
os.environ.setdefault("TELEMETRY_ENABLED", "false")

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402

from app.core.config import get_settings  # noqa: E402
from app.main import app  # noqa: E402

TEST_SUPABASE_URL = "https://project.supabase.test"


@pytest.fixture
async def client() -> AsyncClient:
    """Async HTTP client against the FastAPI app (ASGI)."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture(autouse=True)
def _reset_app_state():
    """Drop dependency overrides and cached settings after each test."""
    yield
    app.dependency_overrides.clear()
    get_settings.cache_clear()


@pytest.fixture
def configured_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Platform URL and both keys set; settings cache cleared."""
    monkeypatch.setenv("SUPABASE_URL", TEST_SUPABASE_URL)
    monkeypatch.setenv("SUPABASE_SERVICE_ROLE_KEY", "service-role-key")
    monkeypatch.setenv("SUPABASE_ANON_KEY", "anon-key")
    get_settings.cache_clear()
