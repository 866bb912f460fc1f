"""API Clients - authenticated admin client and unauthenticated public reader.

Invariants:
    - Every ApiClient call resolves the token first; no token -> AuthenticationError
      and no request is sent
    - Headers: Authorization: Bearer <token>, Content-Type: application/json
    - Non-2xx -> RequestFailedError carrying status and parsed body
    - get() returns parsed JSON; post/put/delete return the httpx.Response

Design Decisions:
    - transport parameter: tests pass httpx.MockTransport or ASGITransport(app)
      instead of patching the network
    - Endpoints are paths joined onto base_url; the same path string doubles as
      the fetch-cache key
"""

import logging
from typing import Any

import httpx

from inkwell.client.session import AuthContext
from inkwell.core.errors import RequestFailedError

logger = logging.getLogger(__name__)


def _parse_body(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return None


def _raise_for_status(method: str, response: httpx.Response) -> None:
    if response.is_success:
        return
    logger.warning(
        f"{method} {response.request.url.path} failed",
        extra={"status_code": response.status_code, "endpoint": response.request.url.path},
    )
    raise RequestFailedError(
        method, str(response.request.url), response.status_code, _parse_body(response),
    )


class ApiClient:
    """Verb helpers for the admin endpoints."""

    def __init__(
        self,
        base_url: str,
        auth: AuthContext,
        transport: httpx.AsyncBaseTransport | None = None,
        timeout: float = 30.0,
    ):
        self.auth = auth
        self._http = httpx.AsyncClient(
            base_url=base_url, transport=transport, timeout=timeout,
        )

    def _headers(self) -> dict[str, str]:
        token = self.auth.require_token()
        return {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {token}",
        }

    async def get(self, endpoint: str) -> Any:
        headers = self._headers()
        response = await self._http.get(endpoint, headers=headers)
        _raise_for_status("GET", response)
        return response.json()

    async def post(self, endpoint: str, body: Any) -> httpx.Response:
        headers = self._headers()
        response = await self._http.post(endpoint, headers=headers, json=body)
        _raise_for_status("POST", response)
        return response

    async def put(self, endpoint: str, body: Any) -> httpx.Response:
        headers = self._headers()
        response = await self._http.put(endpoint, headers=headers, json=body)
        _raise_for_status("PUT", response)
        return response

    async def delete(self, endpoint: str) -> httpx.Response:
        headers = self._headers()
        response = await self._http.delete(endpoint, headers=headers)
        _raise_for_status("DELETE", response)
        return response

    async def aclose(self) -> None:
        await self._http.aclose()


class PublicClient:
    """Reader for the unauthenticated /api/posts endpoints."""

    def __init__(
        self,
        base_url: str,
        transport: httpx.AsyncBaseTransport | None = None,
        timeout: float = 30.0,
    ):
        self._http = httpx.AsyncClient(
            base_url=base_url, transport=transport, timeout=timeout,
        )

    async def get(self, endpoint: str) -> Any:
        response = await self._http.get(endpoint)
        _raise_for_status("GET", response)
        return response.json()

    async def aclose(self) -> None:
        await self._http.aclose()
