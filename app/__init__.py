"""Latency Probe Application Package — Railway ↔ Supabase round-trip diagnostics.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
