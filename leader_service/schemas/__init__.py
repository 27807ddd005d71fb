"""Pydantic Schemas — validation for leader payloads and responses.

Invariants:
    - Schemas validate at the store boundary (payloads, returned records)

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
