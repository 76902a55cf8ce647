"""Core Layer — pure helpers, no network, no FastAPI.

Invariants:
    - No module in core/ imports from services/, api/, or infrastructure/
"""
