from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

import httpx

from pokedex_lite.infra.http.config import http_timeout_seconds, user_agent


def build_http_client(transport: httpx.AsyncBaseTransport | None = None) -> httpx.AsyncClient:
    """
    Build the async HTTP client shared by one screen session.

    Client Configuration:
    - timeout: from CATALOG_HTTP_TIMEOUT_SECONDS, no timeout when unset
    - follow_redirects: upstream cursors are absolute URLs and may redirect
    - headers: JSON accept + configurable User-Agent

    Args:
        transport: Optional transport override (httpx.MockTransport in tests)
    """
    return httpx.AsyncClient(
        timeout=httpx.Timeout(http_timeout_seconds()),
        follow_redirects=True,
        headers={
            "User-Agent": user_agent(),
            "Accept": "application/json",
        },
        transport=transport,
    )


@asynccontextmanager
async def http_client(
    transport: httpx.AsyncBaseTransport | None = None,
) -> AsyncIterator[httpx.AsyncClient]:
    """Open an HTTP client and close it when the session ends."""
    client = build_http_client(transport=transport)

    try:
        yield client
    finally:
        await client.aclose()
