"""Infrastructure Layer — database lifecycle, repositories, and cross-cutting concerns.

Invariants:
    - Repositories never raise: every fault becomes a StoreResult
    - Infrastructure never imports from services/ or api/
"""
