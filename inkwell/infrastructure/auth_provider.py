"""Auth Provider Client - hosted email/password auth over the GoTrue REST API.

Invariants:
    - Every call sends the project anon key as the `apikey` header
    - get_user() raises AuthenticationError for a missing or rejected token
    - Transport failures and 5xx map to ExternalServiceError
    - No retries: a failed call is terminal for the calling action

Design Decisions:
    - httpx.AsyncClient injected (or created per instance) so tests swap the
      transport without patching module globals
    - Tokens arrive either bare or as "Bearer <token>"; both are accepted
"""

import logging
from typing import Protocol

import httpx

from inkwell.core.errors import AuthenticationError, ExternalServiceError
from inkwell.schemas.auth import AuthSession, AuthUser

logger = logging.getLogger(__name__)

_SERVICE = "Auth provider"


def strip_bearer(authorization: str | None) -> str:
    """Extract the raw token from an Authorization header value."""
    value = (authorization or "").strip()
    if value[:7].lower() == "bearer ":
        return value[7:].strip()
    return value


def _error_message(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return response.text or f"HTTP {response.status_code}"
    if isinstance(body, dict):
        for key in ("msg", "message", "error_description", "error"):
            if isinstance(body.get(key), str):
                return body[key]
    return f"HTTP {response.status_code}"


class AuthProvider(Protocol):
    """Contract the API layer and the signup controller depend on."""
    async def get_user(self, token: str) -> AuthUser: ...
    async def sign_up(self, email: str, password: str, redirect_to: str | None = None) -> AuthUser: ...
    async def sign_in_with_password(self, email: str, password: str) -> AuthSession: ...


class GoTrueAuthProvider:
    """AuthProvider backed by a GoTrue-compatible auth service."""

    def __init__(
        self,
        base_url: str,
        anon_key: str,
        timeout_seconds: float = 10.0,
        client: httpx.AsyncClient | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.anon_key = anon_key
        self._client = client or httpx.AsyncClient(timeout=timeout_seconds)

    async def get_user(self, token: str) -> AuthUser:
        """Resolve an access token to its user; the token check behind every admin call."""
        token = strip_bearer(token)
        if not token:
            raise AuthenticationError("Authorization header is missing")
        response = await self._request(
            "GET", "/auth/v1/user",
            headers={"Authorization": f"Bearer {token}"},
        )
        if 400 <= response.status_code < 500:
            raise AuthenticationError(_error_message(response))
        return AuthUser.model_validate(response.json())

    async def sign_up(
        self, email: str, password: str, redirect_to: str | None = None,
    ) -> AuthUser:
        params = {"redirect_to": redirect_to} if redirect_to else None
        response = await self._request(
            "POST", "/auth/v1/signup",
            json={"email": email, "password": password},
            params=params,
        )
        if 400 <= response.status_code < 500:
            raise AuthenticationError(_error_message(response))
        body = response.json()
        # Confirmation-pending signups return the user at top level
        return AuthUser.model_validate(body.get("user") or body)

    async def sign_in_with_password(self, email: str, password: str) -> AuthSession:
        response = await self._request(
            "POST", "/auth/v1/token",
            json={"email": email, "password": password},
            params={"grant_type": "password"},
        )
        if 400 <= response.status_code < 500:
            raise AuthenticationError(_error_message(response))
        return AuthSession.model_validate(response.json())

    async def aclose(self) -> None:
        await self._client.aclose()

    async def _request(self, method: str, path: str, **kwargs) -> httpx.Response:
        headers = {"apikey": self.anon_key, **kwargs.pop("headers", {})}
        try:
            response = await self._client.request(
                method, f"{self.base_url}{path}", headers=headers, **kwargs,
            )
        except httpx.HTTPError as e:
            logger.error(f"Auth provider unreachable: {e}", extra={"endpoint": path})
            raise ExternalServiceError(_SERVICE, "unreachable")
        if response.status_code >= 500:
            logger.error(
                f"Auth provider returned {response.status_code}",
                extra={"endpoint": path, "status_code": response.status_code},
            )
            raise ExternalServiceError(
                _SERVICE, _error_message(response), response.status_code,
            )
        return response
