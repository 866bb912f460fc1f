"""GoTrueAuthProvider - token check, signup and password grant over a mock transport."""

import httpx
import pytest

from inkwell.core.errors import AuthenticationError, ExternalServiceError
from inkwell.infrastructure.auth_provider import GoTrueAuthProvider, strip_bearer


def _provider(handler) -> GoTrueAuthProvider:
    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return GoTrueAuthProvider("https://auth.test/", "anon-key", client=client)


@pytest.mark.parametrize("header,expected", [
    ("Bearer abc", "abc"),
    ("bearer  abc ", "abc"),
    ("abc", "abc"),
    ("", ""),
    (None, ""),
])
def test_strip_bearer(header, expected):
    assert strip_bearer(header) == expected


async def test_get_user_sends_apikey_and_bearer():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["url"] = str(request.url)
        seen["apikey"] = request.headers["apikey"]
        seen["auth"] = request.headers["authorization"]
        return httpx.Response(200, json={"id": "u1", "email": "a@example.com", "aud": "x"})

    user = await _provider(handler).get_user("Bearer tok")
    assert user.id == "u1"
    assert user.email == "a@example.com"
    assert seen == {
        "url": "https://auth.test/auth/v1/user",
        "apikey": "anon-key",
        "auth": "Bearer tok",
    }


async def test_missing_token_never_calls_provider():
    calls = []

    def handler(request):
        calls.append(request)
        return httpx.Response(200, json={})

    with pytest.raises(AuthenticationError, match="Authorization header is missing"):
        await _provider(handler).get_user("")
    assert calls == []


async def test_rejected_token_raises_authentication_error():
    def handler(request):
        return httpx.Response(401, json={"msg": "invalid JWT"})

    with pytest.raises(AuthenticationError, match="invalid JWT") as exc:
        await _provider(handler).get_user("expired")
    assert exc.value.http_status == 400


async def test_provider_outage_is_external_error():
    def handler(request):
        return httpx.Response(503, text="down")

    with pytest.raises(ExternalServiceError) as exc:
        await _provider(handler).get_user("tok")
    assert exc.value.status_code == 503


async def test_transport_failure_is_external_error():
    def handler(request):
        raise httpx.ConnectError("refused", request=request)

    with pytest.raises(ExternalServiceError, match="unreachable"):
        await _provider(handler).get_user("tok")


async def test_sign_up_passes_redirect():
    seen = {}

    def handler(request):
        seen["params"] = dict(request.url.params)
        seen["body"] = request.read()
        return httpx.Response(200, json={"id": "new", "email": "n@example.com"})

    user = await _provider(handler).sign_up(
        "n@example.com", "password1", redirect_to="http://localhost:3000/login",
    )
    assert user.id == "new"
    assert seen["params"] == {"redirect_to": "http://localhost:3000/login"}
    assert b'"password1"' in seen["body"]


async def test_sign_up_unwraps_user():
    def handler(request):
        return httpx.Response(200, json={"user": {"id": "u9"}, "session": None})

    user = await _provider(handler).sign_up("x@example.com", "password1")
    assert user.id == "u9"


async def test_sign_up_rejection():
    def handler(request):
        return httpx.Response(422, json={"msg": "User already registered"})

    with pytest.raises(AuthenticationError, match="User already registered"):
        await _provider(handler).sign_up("x@example.com", "password1")


async def test_sign_in_with_password():
    def handler(request):
        assert request.url.params["grant_type"] == "password"
        return httpx.Response(200, json={
            "access_token": "jwt", "token_type": "bearer", "expires_in": 3600,
            "refresh_token": "r", "user": {"id": "u1", "email": "a@example.com"},
        })

    session = await _provider(handler).sign_in_with_password("a@example.com", "pw")
    assert session.access_token == "jwt"
    assert session.user.email == "a@example.com"


async def test_sign_in_bad_credentials():
    def handler(request):
        return httpx.Response(400, json={"error_description": "Invalid login credentials"})

    with pytest.raises(AuthenticationError, match="Invalid login credentials"):
        await _provider(handler).sign_in_with_password("a@example.com", "bad")
