"""Supabase Probe Adapter — wraps the async Supabase client behind (result, error) outcomes.

Invariants:
    - Structured PostgREST / auth errors are returned as QueryError values, never raised
    - Everything else (network failure, misconfiguration, bugs) propagates to the caller
    - One ProbeDatabase per process, built in the FastAPI lifespan, never per request
    - No retries, no timeouts beyond the client's own defaults

Design Decisions:
    - Adapter over raw client: probes only see query()/get_session(), which keeps
      the domain-error vs hard-failure split in a single place (ADR: single responsibility)
    - Unconfigured adapter instead of startup failure: the process boots without
      SUPABASE_URL/SUPABASE_ANON_KEY and the first probe fails with
      DatabaseNotConfiguredError (ADR: no startup validation of credentials)
"""

import logging
from dataclasses import dataclass, field
from typing import Any

from postgrest import APIError
from supabase import AsyncClient, acreate_client
from supabase_auth.errors import AuthError

from app.config import Settings
from app.core.errors import DatabaseNotConfiguredError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class QueryError:
    """Structured error reported by a completed database call."""
    message: str
    code: str | None = None
    details: str | None = None
    hint: str | None = None

    @classmethod
    def from_api_error(cls, exc: APIError) -> "QueryError":
        return cls(
            message=exc.message or str(exc),
            code=exc.code,
            details=exc.details,
            hint=exc.hint,
        )


@dataclass(frozen=True)
class QueryOutcome:
    """Result of a table query: rows and/or count, or a domain error."""
    rows: list[dict[str, Any]] = field(default_factory=list)
    count: int | None = None
    error: QueryError | None = None


@dataclass(frozen=True)
class SessionOutcome:
    """Result of an auth session lookup."""
    session: Any = None
    error: QueryError | None = None


class ProbeDatabase:
    """The two database operations the probes depend on."""

    def __init__(self, client: AsyncClient | None, unavailable_reason: str | None = None):
        self._client = client
        self._unavailable_reason = unavailable_reason

    @property
    def configured(self) -> bool:
        return self._client is not None

    def _require_client(self) -> AsyncClient:
        if self._client is None:
            raise DatabaseNotConfiguredError(
                self._unavailable_reason or "client not initialized",
            )
        return self._client

    async def query(
        self,
        table: str,
        columns: str,
        *,
        limit: int | None = None,
        count: str | None = None,
        head: bool = False,
    ) -> QueryOutcome:
        """Run a read query. count is a PostgREST count method ("exact", ...)."""
        client = self._require_client()
        request = client.table(table).select(columns, count=count, head=head)
        if limit is not None:
            request = request.limit(limit)
        try:
            response = await request.execute()
        except APIError as e:
            logger.warning(
                f"Query on {table} returned an error: {e.message}",
                extra={"error_code": e.code},
            )
            return QueryOutcome(error=QueryError.from_api_error(e))
        return QueryOutcome(rows=response.data or [], count=response.count)

    async def get_session(self) -> SessionOutcome:
        """Fetch the current auth session (None for an anonymous client)."""
        client = self._require_client()
        try:
            session = await client.auth.get_session()
        except AuthError as e:
            logger.warning(
                f"Auth session lookup returned an error: {e.message}",
                extra={"error_code": getattr(e, "code", None)},
            )
            return SessionOutcome(error=QueryError(message=e.message))
        return SessionOutcome(session=session)


# Singleton (initialized on startup)
probe_database: ProbeDatabase | None = None


async def build_probe_database(
    supabase_url: str | None, supabase_key: str | None,
) -> ProbeDatabase:
    """Build the adapter, degrading to an unconfigured one on bad settings."""
    if not supabase_url or not supabase_key:
        missing = [
            name for name, value in (
                ("SUPABASE_URL", supabase_url),
                ("SUPABASE_ANON_KEY", supabase_key),
            ) if not value
        ]
        reason = f"missing {', '.join(missing)}"
        logger.warning(f"Supabase client not created: {reason}")
        return ProbeDatabase(None, reason)
    try:
        client = await acreate_client(supabase_url, supabase_key)
    except Exception as e:
        logger.error(f"Supabase client could not be created: {e}")
        return ProbeDatabase(None, str(e))
    return ProbeDatabase(client)


async def init_probe_database(settings: Settings) -> ProbeDatabase:
    global probe_database
    probe_database = await build_probe_database(
        settings.supabase_url, settings.supabase_anon_key,
    )
    return probe_database


def get_probe_database() -> ProbeDatabase:
    """FastAPI dependency for the process-wide probe database."""
    if probe_database is None:
        return ProbeDatabase(None, "application startup has not run")
    return probe_database
