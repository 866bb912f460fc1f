"""Auth Context - the explicitly passed session holding the current bearer credential.

Invariants:
    - require_token() never returns an empty token; absence raises AuthenticationError
    - Signing out clears the token in place so every client sharing the context sees it
"""

from dataclasses import dataclass

from inkwell.core.errors import AuthenticationError
from inkwell.schemas.auth import AuthSession


@dataclass
class AuthContext:
    access_token: str | None = None
    user_email: str | None = None

    @classmethod
    def from_session(cls, session: AuthSession) -> "AuthContext":
        return cls(
            access_token=session.access_token,
            user_email=session.user.email if session.user else None,
        )

    @property
    def is_authenticated(self) -> bool:
        return bool(self.access_token)

    def require_token(self) -> str:
        if not self.access_token:
            raise AuthenticationError()
        return self.access_token

    def sign_out(self) -> None:
        self.access_token = None
        self.user_email = None
