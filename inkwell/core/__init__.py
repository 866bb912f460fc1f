"""Core Layer - pure domain logic: validation, messages, errors, form values.

Invariants:
    - No module in core/ imports from services/, api/, client/, infrastructure/, or db/
    - All functions are pure and deterministic
"""
