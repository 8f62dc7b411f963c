from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from pokedex_lite.entrypoints.http.dependencies import build_coordinator
from pokedex_lite.entrypoints.http.exception_handlers import register_exception_handlers
from pokedex_lite.entrypoints.http.routes.health import router as health_router
from pokedex_lite.entrypoints.http.routes.screen import router as screen_router
from pokedex_lite.infra.http.client import http_client


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Mount the screen: one HTTP client and one coordinator, dropped on shutdown."""
    async with http_client() as client:
        app.state.coordinator = build_coordinator(client)
        try:
            yield
        finally:
            app.state.coordinator = None


def build_app() -> FastAPI:
    app = FastAPI(
        title="Pokedex Lite API",
        description="""
        Screen shell for browsing a paginated public catalog (PokeAPI).

        ## Features
        - Paginated catalog list (load more on scroll)
        - Search a single entry by name
        - Entry details (height, base experience, abilities, held items)

        ## Model
        Every route is an intent; every response is the screen state after it.

        ## Authentication
        None.

        ## Error Handling
        Upstream failures are reflected in the screen state, not as HTTP errors.
        Invalid intent input returns a structured 422.
        """,
        version="0.1.0",
        docs_url="/docs",  # Swagger UI
        redoc_url="/redoc",  # ReDoc alternative
        openapi_url="/openapi.json",  # OpenAPI schema
        lifespan=lifespan,
    )

    # Register global exception handlers
    register_exception_handlers(app)

    # Register routers
    app.include_router(health_router)
    app.include_router(screen_router, prefix="/v1")

    return app


app = build_app()
