"""Auth Provider Schemas - the subset of the hosted auth provider's payloads we read.

Invariants:
    - Unknown provider fields are ignored (extra="ignore")
"""

from pydantic import BaseModel, ConfigDict


class AuthUser(BaseModel):
    """User record returned for a valid access token."""
    model_config = ConfigDict(extra="ignore")

    id: str
    email: str | None = None


class AuthSession(BaseModel):
    """Password grant result: the bearer credential and its owner."""
    model_config = ConfigDict(extra="ignore")

    access_token: str
    token_type: str = "bearer"
    expires_in: int | None = None
    refresh_token: str | None = None
    user: AuthUser | None = None
