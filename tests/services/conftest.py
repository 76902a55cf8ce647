"""Service test fixtures — fake database, fake clock, FastAPI test client.

Invariants:
    - get_probe_database overridden with a FakeProbeDatabase per test
    - get_settings overridden with explicit Settings (no .env leakage)
    - perf_counter in app.services.probes replaced by FakeClock

Design Decisions:
    - httpx ASGITransport does not run the lifespan: no Supabase client is ever built
"""

import pytest
from httpx import ASGITransport, AsyncClient

from app.config import Settings, get_settings
from app.infrastructure.supabase_client import get_probe_database
from app.main import app
from tests.services.fake_database import FakeClock, FakeProbeDatabase


@pytest.fixture
def fake_db():
    return FakeProbeDatabase()


@pytest.fixture
def fake_clock(monkeypatch):
    clock = FakeClock()
    monkeypatch.setattr("app.services.probes.perf_counter", clock)
    return clock


@pytest.fixture
def settings():
    return Settings(
        _env_file=None,
        supabase_url="https://test-project.supabase.co",
        supabase_anon_key="test-anon-key",
        railway_region="us-west1",
        probe_table="users",
    )


@pytest.fixture
async def client(fake_db, settings):
    """FastAPI test client with database and settings dependencies overridden."""
    app.dependency_overrides[get_probe_database] = lambda: fake_db
    app.dependency_overrides[get_settings] = lambda: settings

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
