"""Service Layer — timed probe sequences and request introspection.

Invariants:
    - Services depend on ProbeDatabase, never on the raw Supabase client
"""
