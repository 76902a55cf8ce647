"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - Secrets (SUPABASE_ANON_KEY) come from environment variables, never hardcoded
    - get_settings() is cached (lru_cache), single instance per process
    - Missing Supabase credentials are NOT rejected here: the first probe fails instead

Design Decisions:
    - pydantic-settings over raw os.environ: type coercion, .env file support
    - Supabase URL/key optional: the service must boot and answer GET / even
      when the database is not configured (ADR: diagnostic tool, partial function > crash)
"""

from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Server
    host: str = "0.0.0.0"
    port: int = 3000

    # Supabase
    supabase_url: str | None = None
    supabase_anon_key: str | None = None

    # Railway: cosmetic label only
    railway_region: str = "unknown"

    # Probes
    probe_table: str = "users"
    stress_default_count: int = 10
    stress_warn_threshold: int = 1000

    # Honor X-Forwarded-* only behind a known proxy
    trust_proxy: bool = False

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
