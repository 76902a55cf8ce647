"""Infrastructure Layer — external service clients and cross-cutting concerns.

Invariants:
    - Infrastructure never imports from services/ or api/
    - External clients expose outcomes, not raw SDK responses

Design Decisions:
    - Thin adapters over raw clients (ADR: single responsibility)
"""
