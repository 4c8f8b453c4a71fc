"""Pydantic Schemas — request/response validation for API endpoints.

Invariants:
    - Schemas validate at system boundary (user input, API responses)
    - Domain enums from core/ used for enum fields: unknown values rejected

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
