"""Services Layer - persistence operations behind the routes, thumbnail handling.

Invariants:
    - Services take an AsyncSession (or StorageClient) explicitly, never a global
    - Services raise InkwellError subclasses; routes never build error bodies
"""
