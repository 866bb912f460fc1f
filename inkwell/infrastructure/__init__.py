"""Infrastructure Layer - database, object storage, auth provider, logging.

Invariants:
    - Every provider failure is mapped to an InkwellError subclass
    - No retries: every external failure is terminal for the calling action
"""
