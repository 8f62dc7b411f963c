"""PokeAPI implementation of CatalogGateway."""

from __future__ import annotations

import logging
from typing import Any
from urllib.parse import quote

import httpx

from pokedex_lite.domain.entry import CatalogEntry, CatalogPage, EntryDetail, FilterResult
from pokedex_lite.domain.errors import NotFoundError, UpstreamError
from pokedex_lite.ports.catalog_gateway import CatalogGateway

logger = logging.getLogger(__name__)

ARTWORK_KEY = "official-artwork"


class PokeApiCatalogGateway(CatalogGateway):
    """
    PokeAPI implementation of CatalogGateway.

    - One GET per call, no retries, no caching
    - List pages come from the catalog root or the upstream ``next`` URL
    - Single lookup and detail lookup hit the same ``<root>/{name}`` resource
    - Converts JSON payloads (infrastructure) to frozen domain objects
    - Any transport error, non-2xx status or malformed body becomes UpstreamError
    """

    def __init__(self, client: httpx.AsyncClient, base_url: str) -> None:
        """
        Initialize gateway with an HTTP client.

        Args:
            client: Shared async client (owned by the caller)
            base_url: Catalog root, e.g. https://pokeapi.co/api/v2/pokemon
        """
        self._client = client
        self._base_url = base_url.rstrip("/")

    async def fetch_page(self, cursor: str | None = None) -> CatalogPage:
        url = cursor or self._base_url
        payload = await self._get_json(url)

        try:
            entries = tuple(
                CatalogEntry(name=str(item["name"]), reference=str(item["url"]))
                for item in payload["results"]
            )
            next_cursor = payload.get("next")
        except (KeyError, TypeError) as exc:
            raise UpstreamError(f"Malformed catalog page: {exc!r}", url=url) from exc

        if next_cursor is not None and not isinstance(next_cursor, str):
            raise UpstreamError("Malformed catalog page: 'next' is not a URL", url=url)

        return CatalogPage(entries=entries, next_cursor=next_cursor or None)

    async def fetch_entry(self, name: str) -> FilterResult:
        url = self._entry_url(name)
        payload = await self._get_json(url, resource_id=name)

        try:
            return FilterResult(
                name=str(payload["name"]),
                artwork_url=self._artwork_url(payload),
            )
        except (KeyError, TypeError, AttributeError) as exc:
            raise UpstreamError(f"Malformed entry: {exc!r}", url=url) from exc

    async def fetch_detail(self, name: str) -> EntryDetail:
        url = self._entry_url(name)
        payload = await self._get_json(url, resource_id=name)

        try:
            base_experience = payload.get("base_experience")
            return EntryDetail(
                name=str(payload.get("name") or name),
                height=int(payload["height"]),
                base_experience=int(base_experience) if base_experience is not None else None,
                abilities=tuple(
                    str(slot["ability"]["name"]) for slot in payload.get("abilities") or []
                ),
                held_items=tuple(
                    str(slot["item"]["name"]) for slot in payload.get("held_items") or []
                ),
                artwork_url=self._artwork_url(payload),
            )
        except (KeyError, TypeError, ValueError, AttributeError) as exc:
            raise UpstreamError(f"Malformed entry detail: {exc!r}", url=url) from exc

    def _entry_url(self, name: str) -> str:
        return f"{self._base_url}/{quote(name.lower(), safe='')}"

    @staticmethod
    def _artwork_url(payload: dict[str, Any]) -> str | None:
        sprites = payload.get("sprites") or {}
        artwork = (sprites.get("other") or {}).get(ARTWORK_KEY) or {}
        url = artwork.get("front_default")
        return url if isinstance(url, str) else None

    async def _get_json(self, url: str, resource_id: str | None = None) -> dict[str, Any]:
        """
        GET ``url`` and decode a JSON object body.

        Raises:
            NotFoundError: On 404 for a single-entity lookup
            UpstreamError: On any other failure
        """
        logger.debug("Upstream request", extra={"url": url})

        try:
            response = await self._client.get(url)
        except httpx.HTTPError as exc:
            raise UpstreamError(f"Request failed: {exc!r}", url=url) from exc

        if response.status_code == 404 and resource_id is not None:
            raise NotFoundError(resource="CatalogEntry", identifier=resource_id, url=url)

        if not response.is_success:
            raise UpstreamError(
                f"Unexpected status {response.status_code}",
                url=url,
                status_code=response.status_code,
            )

        try:
            payload = response.json()
        except ValueError as exc:
            raise UpstreamError("Response body is not valid JSON", url=url) from exc

        if not isinstance(payload, dict):
            raise UpstreamError("Response body is not a JSON object", url=url)

        return payload
