"""
Dependency injection for FastAPI routes.

Key principle: one screen session per application. The coordinator and its
HTTP client are created in the app lifespan and stored on ``app.state``;
routes only ever read them from there.
"""

from __future__ import annotations

import httpx
from fastapi import Request

from pokedex_lite.adapters.pokeapi_catalog_gateway import PokeApiCatalogGateway
from pokedex_lite.domain.errors import InternalError
from pokedex_lite.infra.http.config import catalog_api_url
from pokedex_lite.use_cases.catalog_coordinator import CatalogCoordinator


def build_coordinator(client: httpx.AsyncClient, base_url: str | None = None) -> CatalogCoordinator:
    """
    Wire a CatalogCoordinator to the PokeAPI gateway.

    Args:
        client: Shared async HTTP client (owned by the lifespan)
        base_url: Catalog root; defaults to CATALOG_API_URL

    Returns:
        CatalogCoordinator: Fresh coordinator with empty state
    """
    gateway = PokeApiCatalogGateway(client=client, base_url=base_url or catalog_api_url())
    return CatalogCoordinator(catalog_gateway=gateway)


def get_coordinator(request: Request) -> CatalogCoordinator:
    """
    Return the screen's coordinator.

    Raises:
        InternalError: If the app was started without its lifespan
    """
    coordinator = getattr(request.app.state, "coordinator", None)
    if coordinator is None:
        raise InternalError("Screen session is not initialized")
    return coordinator
