"""API Dependencies - auth provider and the admin guard.

Invariants:
    - require_admin runs before any admin route body touches the database
    - A missing/invalid Authorization header raises AuthenticationError (400)
    - The provider singleton is built once per process from Settings

Design Decisions:
    - The factory is a plain lru_cache function so tests replace it with
      app.dependency_overrides instead of monkeypatching modules
"""

import logging
from functools import lru_cache

from fastapi import Depends, Header

from inkwell.config import get_settings
from inkwell.infrastructure.auth_provider import AuthProvider, GoTrueAuthProvider
from inkwell.schemas.auth import AuthUser

logger = logging.getLogger(__name__)


@lru_cache
def get_auth_provider() -> AuthProvider:
    settings = get_settings()
    return GoTrueAuthProvider(
        settings.auth_url,
        settings.auth_anon_key,
        timeout_seconds=settings.auth_timeout_seconds,
    )


async def require_admin(
    authorization: str | None = Header(None),
    provider: AuthProvider = Depends(get_auth_provider),
) -> AuthUser:
    """Validate the caller's bearer credential against the auth provider."""
    return await provider.get_user(authorization or "")
