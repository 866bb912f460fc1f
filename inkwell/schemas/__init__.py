"""Pydantic Schemas - request/response contracts for the blog endpoints.

Invariants:
    - Schemas validate at system boundary (request bodies, API responses)
    - Wire names are camelCase; Python attributes stay snake_case

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
