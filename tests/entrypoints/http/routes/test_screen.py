"""
Test suite for the /v1/screen routes.

Routes are exercised with a real CatalogCoordinator wired to the in-memory
gateway (injected through dependency_overrides), so every assertion is on
the snapshot a thin client would render:
- Each intent route returns the post-intent snapshot
- Invalid bodies return the structured 422 format
- Upstream failures surface as state (notice), never as HTTP errors
"""

from __future__ import annotations

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from pokedex_lite.adapters.in_memory_catalog_gateway import InMemoryCatalogGateway
from pokedex_lite.domain.entry import CatalogEntry, EntryDetail
from pokedex_lite.domain.state import NOT_FOUND_NOTICE
from pokedex_lite.entrypoints.http.dependencies import get_coordinator
from pokedex_lite.entrypoints.http.exception_handlers import register_exception_handlers
from pokedex_lite.entrypoints.http.routes.screen import router
from pokedex_lite.use_cases.catalog_coordinator import CatalogCoordinator


@pytest.fixture
def gateway() -> InMemoryCatalogGateway:
    entries = [CatalogEntry(name=f"entry-{i}", reference=f"u{i}") for i in range(5)]
    details = [
        EntryDetail(
            name="pikachu",
            height=4,
            base_experience=112,
            abilities=("static", "lightning-rod"),
            held_items=("oran-berry",),
            artwork_url="https://img/art/25.png",
        )
    ]
    return InMemoryCatalogGateway(entries, details, page_size=2)


@pytest.fixture
def coordinator(gateway: InMemoryCatalogGateway) -> CatalogCoordinator:
    return CatalogCoordinator(catalog_gateway=gateway)


@pytest.fixture
def app(coordinator: CatalogCoordinator) -> FastAPI:
    """Create a test FastAPI app with the screen router and exception handlers."""
    test_app = FastAPI()
    register_exception_handlers(test_app)
    test_app.include_router(router, prefix="/v1")
    test_app.dependency_overrides[get_coordinator] = lambda: coordinator
    return test_app


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    return TestClient(app, raise_server_exceptions=False)


# ==============================================================================
# GET /v1/screen
# ==============================================================================


def test_get_screen_returns_empty_snapshot(
    client: TestClient, gateway: InMemoryCatalogGateway
) -> None:
    response = client.get("/v1/screen")

    assert response.status_code == 200
    data = response.json()
    assert data["view_mode"] == "LIST"
    assert data["catalog"] == []
    assert data["has_more"] is False
    assert data["is_loading"] is False
    assert gateway.calls == []


# ==============================================================================
# Catalog List
# ==============================================================================


def test_initialize_returns_first_page(client: TestClient) -> None:
    response = client.post("/v1/screen/initialize")

    assert response.status_code == 200
    data = response.json()
    assert data["catalog"] == [
        {"name": "entry-0", "url": "u0"},
        {"name": "entry-1", "url": "u1"},
    ]
    assert data["has_more"] is True
    assert data["is_loading"] is False


def test_load_more_until_exhausted(client: TestClient, gateway: InMemoryCatalogGateway) -> None:
    client.post("/v1/screen/initialize")

    client.post("/v1/screen/load-more")
    response = client.post("/v1/screen/load-more")

    data = response.json()
    assert [entry["name"] for entry in data["catalog"]] == [f"entry-{i}" for i in range(5)]
    assert data["has_more"] is False
    assert data["next_cursor"] is None

    calls_before = len(gateway.calls)
    client.post("/v1/screen/load-more")
    assert len(gateway.calls) == calls_before


# ==============================================================================
# Search / Select
# ==============================================================================


def test_search_returns_filtered_snapshot(client: TestClient) -> None:
    response = client.post("/v1/screen/search", json={"query": "Pikachu"})

    assert response.status_code == 200
    data = response.json()
    assert data["view_mode"] == "FILTERED"
    assert data["query"] == "Pikachu"
    assert data["filter_result"] == {"name": "pikachu", "artwork_url": "https://img/art/25.png"}
    assert data["detail"]["height"] == 4
    assert data["detail"]["primary_ability"] == "static"
    assert data["detail"]["primary_held_item"] == "oran-berry"


def test_search_unknown_name_returns_notice_not_error(client: TestClient) -> None:
    client.post("/v1/screen/initialize")

    response = client.post("/v1/screen/search", json={"query": "notarealentity"})

    assert response.status_code == 200
    data = response.json()
    assert data["view_mode"] == "LIST"
    assert data["filter_result"] is None
    assert data["detail"] is None
    assert data["notice"] == NOT_FOUND_NOTICE
    assert len(data["catalog"]) == 2


def test_search_missing_query_returns_422(client: TestClient) -> None:
    response = client.post("/v1/screen/search", json={})

    assert response.status_code == 422
    data = response.json()
    assert data["code"] == "VALIDATION_ERROR"
    assert data["errors"][0]["field"] == "query"


def test_search_blank_query_returns_domain_validation_error(client: TestClient) -> None:
    response = client.post("/v1/screen/search", json={"query": "   "})

    assert response.status_code == 422
    assert response.json() == {
        "detail": "Validation failed",
        "code": "VALIDATION_ERROR",
        "errors": [{"field": "query", "message": "Must not be empty", "code": "EMPTY_QUERY"}],
    }


def test_search_blank_query_leaves_query_text_unchanged(
    client: TestClient, gateway: InMemoryCatalogGateway
) -> None:
    client.put("/v1/screen/query", json={"query": "pika"})

    response = client.post("/v1/screen/search", json={"query": "   "})

    assert response.status_code == 422
    assert client.get("/v1/screen").json()["query"] == "pika"
    assert gateway.calls == []


def test_select_entry_mirrors_name_into_query(client: TestClient) -> None:
    response = client.post("/v1/screen/select", json={"name": "pikachu"})

    assert response.status_code == 200
    data = response.json()
    assert data["query"] == "pikachu"
    assert data["view_mode"] == "FILTERED"


# ==============================================================================
# Synchronous Intents
# ==============================================================================


def test_set_query_updates_can_search(client: TestClient) -> None:
    response = client.put("/v1/screen/query", json={"query": "char"})

    assert response.json()["query"] == "char"
    assert response.json()["can_search"] is True

    response = client.put("/v1/screen/query", json={"query": ""})

    assert response.json()["can_search"] is False


def test_clear_filter_returns_to_list(client: TestClient) -> None:
    client.post("/v1/screen/initialize")
    client.post("/v1/screen/search", json={"query": "pikachu"})

    response = client.post("/v1/screen/clear-filter")

    data = response.json()
    assert data["view_mode"] == "LIST"
    assert data["filter_result"] is None
    assert data["detail"] is None
    assert data["query"] == ""
    assert len(data["catalog"]) == 2


def test_dismiss_notice(client: TestClient) -> None:
    client.post("/v1/screen/search", json={"query": "missingno"})

    response = client.delete("/v1/screen/notice")

    assert response.status_code == 200
    assert response.json()["notice"] is None
