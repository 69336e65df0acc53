"""Thin Supabase REST client (no supabase-py).

Rows go through PostgREST (/rest/v1) and notifications through the Realtime
broadcast REST endpoint (/realtime/v1/api/broadcast). Authenticates with an
API key sent as both `apikey` and bearer token; which key (service role or
anon) decides what row-level security lets through.
All HTTP calls use httpx.AsyncClient so they do not block the event loop.
"""

from __future__ import annotations

import json
from typing import Any

import httpx

_REST_PATH = "/rest/v1"
_BROADCAST_PATH = "/realtime/v1/api/broadcast"


class PlatformRequestError(Exception):
    """Raised when the platform answers with a non-2xx status."""

    def __init__(self, status_code: int, message: str, code: str | None = None) -> None:
        self.status_code = status_code
        self.message = message
        self.code = code
        super().__init__(f"{status_code}: {message}")


def _error_from_response(resp: httpx.Response) -> PlatformRequestError:
    """Build PlatformRequestError from a PostgREST/Realtime error body."""
    message = resp.reason_phrase or "Request failed"
    code = None
    try:
        body = resp.json()
    except ValueError:
        body = None
    if isinstance(body, dict):
        message = body.get("message") or body.get("error") or message
        code = body.get("code")
    return PlatformRequestError(resp.status_code, str(message), code)


async def _request_async(
    client: httpx.AsyncClient,
    url: str,
    method: str = "GET",
    *,
    params: list[tuple[str, str]] | None = None,
    body: Any = None,
    headers: dict[str, str] | None = None,
) -> Any:
    """Perform async HTTP request to the platform. Empty bodies return None."""
    resp = await client.request(method, url, params=params, json=body, headers=headers)
    if resp.status_code >= 400:
        raise _error_from_response(resp)
    raw = resp.content
    return json.loads(raw.decode()) if raw else None


class _TableQuery:
    """Fluent PostgREST request builder; runs via execute()."""

    def __init__(self, client: "SupabaseRESTClient", table: str) -> None:
        self._client = client
        self._table = table
        self._method = "GET"
        self._body: Any = None
        self._params: list[tuple[str, str]] = []
        self._prefer: str | None = None

    def select(self, columns: str = "*") -> "_TableQuery":
        self._params.append(("select", "".join(columns.split())))
        return self

    def insert(self, row: dict[str, Any]) -> "_TableQuery":
        self._method = "POST"
        self._body = row
        self._prefer = "return=representation"
        return self

    def update(self, values: dict[str, Any]) -> "_TableQuery":
        self._method = "PATCH"
        self._body = values
        self._prefer = "return=representation"
        return self

    def _filter(self, column: str, op: str, value: Any) -> "_TableQuery":
        self._params.append((column, f"{op}.{value}"))
        return self

    def eq(self, column: str, value: Any) -> "_TableQuery":
        return self._filter(column, "eq", value)

    def neq(self, column: str, value: Any) -> "_TableQuery":
        return self._filter(column, "neq", value)

    def gte(self, column: str, value: Any) -> "_TableQuery":
        return self._filter(column, "gte", value)

    def lt(self, column: str, value: Any) -> "_TableQuery":
        return self._filter(column, "lt", value)

    def order(self, column: str, *, ascending: bool = True) -> "_TableQuery":
        self._params.append(("order", f"{column}.{'asc' if ascending else 'desc'}"))
        return self

    def limit(self, n: int) -> "_TableQuery":
        self._params.append(("limit", str(n)))
        return self

    async def execute(self) -> list[dict[str, Any]]:
        """Send the request and return the affected/selected rows."""
        headers = self._client.auth_headers()
        if self._prefer:
            headers["Prefer"] = self._prefer
        out = await _request_async(
            self._client.http,
            f"{self._client.base_url}{_REST_PATH}/{self._table}",
            method=self._method,
            params=self._params,
            body=self._body,
            headers=headers,
        )
        if out is None:
            return []
        return out if isinstance(out, list) else [out]


class _Channel:
    """Broadcast channel for one topic."""

    def __init__(self, client: "SupabaseRESTClient", topic: str) -> None:
        self._client = client
        self.topic = topic

    async def send(self, event: str, payload: dict[str, Any]) -> None:
        """Broadcast one message on this topic (delivery is not confirmed)."""
        body = {
            "messages": [
                {"topic": self.topic, "event": event, "payload": payload},
            ]
        }
        await _request_async(
            self._client.http,
            f"{self._client.base_url}{_BROADCAST_PATH}",
            method="POST",
            body=body,
            headers=self._client.auth_headers(),
        )


class SupabaseRESTClient:
    """Lightweight platform client using the REST APIs."""

    def __init__(
        self,
        base_url: str,
        api_key: str,
        *,
        http_client: httpx.AsyncClient | None = None,
        timeout: float = 30.0,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self._api_key = api_key
        self.http = http_client if http_client is not None else httpx.AsyncClient(timeout=timeout)
        self._owns_http = http_client is None

    def auth_headers(self) -> dict[str, str]:
        """Headers authenticating as this client's key."""
        return {
            "apikey": self._api_key,
            "Authorization": f"Bearer {self._api_key}",
            "Content-Type": "application/json",
        }

    def table(self, name: str) -> _TableQuery:
        return _TableQuery(self, name)

    def channel(self, topic: str) -> _Channel:
        return _Channel(self, topic)

    async def aclose(self) -> None:
        """Close the HTTP client only if we created it (do not close injected client)."""
        if self._owns_http:
            await self.http.aclose()
