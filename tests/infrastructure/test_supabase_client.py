"""Supabase Probe Adapter — error-value translation and unconfigured fallback.

Tests:
    - PostgREST APIError becomes QueryOutcome.error (never raised)
    - Non-PostgREST exceptions propagate unchanged
    - AuthError from get_session becomes SessionOutcome.error
    - Missing URL/key produce an adapter whose calls raise DatabaseNotConfiguredError
"""

import pytest
from postgrest import APIError
from supabase_auth.errors import AuthError

import app.infrastructure.supabase_client as client_module
from app.config import Settings
from app.core.errors import DatabaseNotConfiguredError
from app.infrastructure.supabase_client import (
    ProbeDatabase, build_probe_database, get_probe_database, init_probe_database,
)


class _Response:
    def __init__(self, data, count=None):
        self.data = data
        self.count = count


class _QueryBuilder:
    """Records the builder chain; execute() returns or raises the configured result."""

    def __init__(self, log, result):
        self._log = log
        self._result = result

    def select(self, *columns, count=None, head=None):
        self._log.append(("select", columns, count, head))
        return self

    def limit(self, size):
        self._log.append(("limit", size))
        return self

    async def execute(self):
        if isinstance(self._result, BaseException):
            raise self._result
        return self._result


class _Auth:
    def __init__(self, result):
        self._result = result

    async def get_session(self):
        if isinstance(self._result, BaseException):
            raise self._result
        return self._result


class _FakeSupabase:
    def __init__(self, result=None, auth_result=None):
        self.log = []
        self._result = result if result is not None else _Response([{"id": 1}])
        self.auth = _Auth(auth_result)

    def table(self, name):
        self.log.append(("table", name))
        return _QueryBuilder(self.log, self._result)


async def test_query_returns_rows_and_builds_bounded_select():
    fake = _FakeSupabase()
    outcome = await ProbeDatabase(fake).query("users", "id", limit=1)
    assert outcome.rows == [{"id": 1}]
    assert outcome.error is None
    assert fake.log == [
        ("table", "users"),
        ("select", ("id",), None, False),
        ("limit", 1),
    ]


async def test_count_query_skips_limit_and_returns_count():
    fake = _FakeSupabase(_Response([], count=42))
    outcome = await ProbeDatabase(fake).query(
        "users", "*", count="exact", head=True,
    )
    assert outcome.count == 42
    assert ("select", ("*",), "exact", True) in fake.log
    assert not any(entry[0] == "limit" for entry in fake.log)


async def test_api_error_becomes_error_value():
    api_error = APIError({
        "message": "permission denied for table users",
        "code": "42501", "details": None, "hint": None,
    })
    outcome = await ProbeDatabase(_FakeSupabase(api_error)).query(
        "users", "count", limit=1,
    )
    assert outcome.rows == []
    assert outcome.error.message == "permission denied for table users"
    assert outcome.error.code == "42501"


async def test_other_exceptions_propagate():
    db = ProbeDatabase(_FakeSupabase(ConnectionError("dns failure")))
    with pytest.raises(ConnectionError):
        await db.query("users", "id", limit=1)


async def test_get_session_returns_session():
    outcome = await ProbeDatabase(_FakeSupabase(auth_result="session")).get_session()
    assert outcome.session == "session"
    assert outcome.error is None


async def test_get_session_auth_error_becomes_error_value():
    fake = _FakeSupabase(auth_result=AuthError("invalid JWT", "bad_jwt"))
    outcome = await ProbeDatabase(fake).get_session()
    assert outcome.error.message == "invalid JWT"


async def test_unconfigured_adapter_raises_on_every_call():
    db = ProbeDatabase(None, "missing SUPABASE_URL")
    assert db.configured is False
    with pytest.raises(DatabaseNotConfiguredError):
        await db.query("users", "id", limit=1)
    with pytest.raises(DatabaseNotConfiguredError):
        await db.get_session()


async def test_build_without_credentials_is_unconfigured():
    db = await build_probe_database(None, "key")
    assert db.configured is False
    with pytest.raises(DatabaseNotConfiguredError, match="SUPABASE_URL"):
        await db.query("users", "id")


async def test_build_with_rejected_settings_is_unconfigured(monkeypatch):
    async def _reject(url, key):
        raise ValueError("Invalid URL")

    monkeypatch.setattr(client_module, "acreate_client", _reject)
    db = await build_probe_database("not-a-url", "key")
    assert db.configured is False
    with pytest.raises(DatabaseNotConfiguredError, match="Invalid URL"):
        await db.get_session()


async def test_init_installs_process_singleton(monkeypatch):
    fake = _FakeSupabase()

    async def _create(url, key):
        return fake

    monkeypatch.setattr(client_module, "acreate_client", _create)
    monkeypatch.setattr(client_module, "probe_database", None)
    settings = Settings(
        _env_file=None, supabase_url="https://x.supabase.co", supabase_anon_key="k",
    )
    db = await init_probe_database(settings)
    assert get_probe_database() is db
    assert db.configured is True


def test_dependency_before_startup_is_unconfigured(monkeypatch):
    monkeypatch.setattr(client_module, "probe_database", None)
    assert get_probe_database().configured is False
