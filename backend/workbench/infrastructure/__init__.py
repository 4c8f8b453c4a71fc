"""Infrastructure Layer — store session management, identity, and cross-cutting concerns.

Invariants:
    - Infrastructure never imports from services/
    - All store failures mapped to StoreError (core/errors.py)
"""
