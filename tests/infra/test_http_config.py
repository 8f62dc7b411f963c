from __future__ import annotations

import httpx
import pytest

from pokedex_lite.infra.http.client import build_http_client, http_client
from pokedex_lite.infra.http.config import (
    DEFAULT_CATALOG_API_URL,
    DEFAULT_USER_AGENT,
    catalog_api_url,
    http_timeout_seconds,
    user_agent,
)


# ==============================================================================
# config
# ==============================================================================


def test_catalog_api_url_defaults_to_pokeapi(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("CATALOG_API_URL", raising=False)

    assert catalog_api_url() == DEFAULT_CATALOG_API_URL


def test_catalog_api_url_strips_trailing_slash(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CATALOG_API_URL", "http://localhost:8000/api/v2/pokemon/")

    assert catalog_api_url() == "http://localhost:8000/api/v2/pokemon"


def test_timeout_is_none_when_unset(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("CATALOG_HTTP_TIMEOUT_SECONDS", raising=False)

    assert http_timeout_seconds() is None


def test_timeout_parses_float(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CATALOG_HTTP_TIMEOUT_SECONDS", "2.5")

    assert http_timeout_seconds() == 2.5


@pytest.mark.parametrize("raw", ["abc", "0", "-1"])
def test_invalid_timeout_raises(monkeypatch: pytest.MonkeyPatch, raw: str) -> None:
    monkeypatch.setenv("CATALOG_HTTP_TIMEOUT_SECONDS", raw)

    with pytest.raises(RuntimeError, match="CATALOG_HTTP_TIMEOUT_SECONDS"):
        http_timeout_seconds()


def test_user_agent_default_and_override(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("CATALOG_USER_AGENT", raising=False)
    assert user_agent() == DEFAULT_USER_AGENT

    monkeypatch.setenv("CATALOG_USER_AGENT", "my-app/2.0")
    assert user_agent() == "my-app/2.0"


# ==============================================================================
# client
# ==============================================================================


def test_build_http_client_applies_headers_and_timeout(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CATALOG_HTTP_TIMEOUT_SECONDS", "3")
    monkeypatch.setenv("CATALOG_USER_AGENT", "tests/1.0")

    client = build_http_client()

    assert isinstance(client, httpx.AsyncClient)
    assert client.headers["User-Agent"] == "tests/1.0"
    assert client.headers["Accept"] == "application/json"
    assert client.timeout.read == 3.0


def test_build_http_client_without_timeout(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("CATALOG_HTTP_TIMEOUT_SECONDS", raising=False)

    client = build_http_client()

    assert client.timeout.read is None
    assert client.timeout.connect is None


@pytest.mark.asyncio
async def test_http_client_context_closes_client() -> None:
    transport = httpx.MockTransport(lambda request: httpx.Response(200, json={}))

    async with http_client(transport=transport) as client:
        response = await client.get("https://pokeapi.test/api/v2/pokemon")
        assert response.status_code == 200
        assert response.request.headers["Accept"] == "application/json"

    assert client.is_closed
