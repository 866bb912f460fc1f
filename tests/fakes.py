"""Test doubles shared by service and client tests.

Design Decisions:
    - FakeAuthProvider accepts exactly one token so "wrong token" cases need no setup
    - RecordingUI records every blocking interaction in call order
"""

from inkwell.core.errors import AuthenticationError
from inkwell.schemas.auth import AuthSession, AuthUser

VALID_TOKEN = "valid-token"


class FakeAuthProvider:
    def __init__(self, valid_token: str = VALID_TOKEN):
        self.valid_token = valid_token
        self.user_calls: list[str] = []
        self.signups: list[dict] = []
        self.fail_signup = False

    async def get_user(self, token: str) -> AuthUser:
        self.user_calls.append(token)
        raw = token[7:] if token.lower().startswith("bearer ") else token
        if not raw:
            raise AuthenticationError("Authorization header is missing")
        if raw != self.valid_token:
            raise AuthenticationError("invalid JWT: unable to parse or verify signature")
        return AuthUser(id="admin-1", email="admin@example.com")

    async def sign_up(self, email, password, redirect_to=None) -> AuthUser:
        if self.fail_signup:
            raise AuthenticationError("User already registered")
        self.signups.append(
            {"email": email, "password": password, "redirect_to": redirect_to},
        )
        return AuthUser(id="new-user", email=email)

    async def sign_in_with_password(self, email, password) -> AuthSession:
        return AuthSession(
            access_token=self.valid_token, user=AuthUser(id="admin-1", email=email),
        )


class RecordingUI:
    def __init__(self, confirm_answer: bool = True):
        self.confirm_answer = confirm_answer
        self.alerts: list[str] = []
        self.confirms: list[str] = []
        self.routes: list[str] = []

    def alert(self, message: str) -> None:
        self.alerts.append(message)

    def confirm(self, message: str) -> bool:
        self.confirms.append(message)
        return self.confirm_answer

    def navigate(self, route: str) -> None:
        self.routes.append(route)


class FakeApi:
    """Stands in for ApiClient: canned GET data, recorded writes, injectable failures."""

    def __init__(self, responses: dict | None = None):
        self.responses = dict(responses or {})
        self.calls: list[tuple] = []
        self.fail_with: Exception | None = None
        self.gate = None

    async def get(self, endpoint: str):
        self.calls.append(("GET", endpoint))
        return self.responses[endpoint]

    async def _write(self, method: str, endpoint: str, body=None):
        self.calls.append((method, endpoint, body))
        if self.gate is not None:
            await self.gate.wait()
        if self.fail_with is not None:
            raise self.fail_with
        return {"status": "OK"}

    async def post(self, endpoint: str, body):
        return await self._write("POST", endpoint, body)

    async def put(self, endpoint: str, body):
        return await self._write("PUT", endpoint, body)

    async def delete(self, endpoint: str):
        return await self._write("DELETE", endpoint)

    def writes(self) -> list[tuple]:
        return [c for c in self.calls if c[0] != "GET"]
