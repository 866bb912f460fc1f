"""Client Layer - API clients, fetch cache, form controllers and page models.

Invariants:
    - Session state is an explicit AuthContext passed in, never a module global
    - Controllers talk to the user only through the UserInterface protocol
    - No automatic retries: every failure is terminal for the action
"""
