"""Root conftest — shared test configuration."""

import os

# Ensure tests don't accidentally reach a real Supabase project
os.environ.setdefault("SUPABASE_URL", "https://test-project.supabase.co")
os.environ.setdefault("SUPABASE_ANON_KEY", "test-anon-key")
os.environ.setdefault("LOG_FORMAT", "text")
