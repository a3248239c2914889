"""Services Layer — club procedures orchestrating core rules and repositories.

Invariants:
    - Services depend on repository protocols, not on SQLAlchemy
"""
