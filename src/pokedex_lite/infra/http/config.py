from __future__ import annotations

import os

DEFAULT_CATALOG_API_URL = "https://pokeapi.co/api/v2/pokemon"
DEFAULT_USER_AGENT = "pokedex-lite/0.1"


def catalog_api_url() -> str:
    url = os.getenv("CATALOG_API_URL") or DEFAULT_CATALOG_API_URL

    return url.rstrip("/")


def http_timeout_seconds() -> float | None:
    """Per-request timeout, or None (the default) to wait indefinitely."""
    raw = os.getenv("CATALOG_HTTP_TIMEOUT_SECONDS")

    if not raw:
        return None

    try:
        timeout = float(raw)
    except ValueError:
        raise RuntimeError(f"CATALOG_HTTP_TIMEOUT_SECONDS must be a number, got {raw!r}")

    if timeout <= 0:
        raise RuntimeError("CATALOG_HTTP_TIMEOUT_SECONDS must be > 0")

    return timeout


def user_agent() -> str:
    return os.getenv("CATALOG_USER_AGENT") or DEFAULT_USER_AGENT
