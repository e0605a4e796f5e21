"""
storefront_admin.identity_clients.gotrue

HTTP client boundary for the hosted identity provider (GoTrue API).

Responsibilities:
- Resolve a user bearer token to the user record (`GET /auth/v1/user`).
- Remove an account through the admin API (`DELETE /auth/v1/admin/users/{id}`)
  using the server-held service role key.
- Translate provider/transport failures into `DownstreamError`.
"""

from __future__ import annotations

from typing import Any, Protocol
from urllib.parse import quote

import httpx

from storefront_admin.errors import DownstreamError
from storefront_admin.settings import Settings


class AccountAdmin(Protocol):
    async def delete_account(self, user_id: str) -> None: ...


def _error_message(r: httpx.Response) -> str:
    # The provider has used several error shapes across versions.
    try:
        body = r.json()
    except ValueError:
        body = None
    if isinstance(body, dict):
        for key in ("msg", "message", "error_description", "error"):
            value = body.get(key)
            if isinstance(value, str) and value:
                return value
    return f"Identity provider returned HTTP {r.status_code}"


class GoTrueClient:
    """
    Thin async client; the caller owns the `httpx.AsyncClient` (base_url, timeouts).
    Requests are sent once. Nothing here retries.
    """

    def __init__(self, *, settings: Settings, http: httpx.AsyncClient) -> None:
        self._service_key = settings.service_role_key
        self._http = http

    def _headers(self, bearer: str) -> dict[str, str]:
        return {"apikey": self._service_key, "Authorization": f"Bearer {bearer}"}

    async def _send(self, method: str, url: str, *, bearer: str) -> httpx.Response:
        try:
            r = await self._http.request(method, url, headers=self._headers(bearer))
        except httpx.TimeoutException as e:
            raise DownstreamError("Identity provider timed out") from e
        except httpx.HTTPError as e:
            raise DownstreamError("Identity provider unavailable") from e
        if r.is_error:
            raise DownstreamError(_error_message(r), upstream_status=r.status_code)
        return r

    async def get_user(self, token: str) -> dict[str, Any]:
        r = await self._send("GET", "/auth/v1/user", bearer=token)
        try:
            user = r.json()
        except ValueError as e:
            raise DownstreamError("Identity provider returned an invalid user") from e
        if not isinstance(user, dict):
            raise DownstreamError("Identity provider returned an invalid user")
        return user

    async def delete_user(self, user_id: str) -> None:
        # Admin API: authenticated with the service role key, never the caller's token.
        await self._send(
            "DELETE",
            f"/auth/v1/admin/users/{quote(user_id, safe='')}",
            bearer=self._service_key,
        )


class GoTrueAccountAdmin:
    def __init__(self, *, client: GoTrueClient) -> None:
        self._client = client

    async def delete_account(self, user_id: str) -> None:
        await self._client.delete_user(user_id)


def create_http_client(settings: Settings) -> httpx.AsyncClient:
    # One pooled client per process; every call is bounded by the same timeout.
    return httpx.AsyncClient(
        base_url=settings.supabase_url.rstrip("/"),
        timeout=httpx.Timeout(settings.upstream_timeout_seconds),
    )


# --- Module Notes -----------------------------------------------------------
# The service role key bypasses row-level security on the hosted project. It must
# only be used for the admin endpoints and never appear in logs or responses.
