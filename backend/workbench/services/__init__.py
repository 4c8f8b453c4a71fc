"""Services Layer — membership store, authorization guard, resource services.

Invariants:
    - Every resource service method takes the caller identity explicitly
    - Every scoped read or write passes the guard, then re-filters the store
      statement by the same membership predicate

Design Decisions:
    - One service class per resource kind, constructed per request with the
      request's AsyncSession
"""
