"""Club Directory Application Package — permission-gated club directory API.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
