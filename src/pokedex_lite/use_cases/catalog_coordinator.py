"""Catalog fetch coordinator: the single screen's intent handlers."""

from __future__ import annotations

import logging
from typing import Callable

from pokedex_lite.domain.entry import EntryQuery
from pokedex_lite.domain.result import Err, Ok, attempt
from pokedex_lite.domain.state import (
    CatalogLoaded,
    CatalogRequested,
    CoordinatorState,
    DetailRequested,
    DetailResolved,
    Event,
    FilterCleared,
    NoticeDismissed,
    PageLoaded,
    PageRequested,
    QueryChanged,
    SearchRequested,
    SearchResolved,
    ViewMode,
    reduce,
)
from pokedex_lite.ports.catalog_gateway import CatalogGateway

logger = logging.getLogger(__name__)

StateListener = Callable[[CoordinatorState], None]


class CatalogCoordinator:
    """
    Owns the upstream call sequence and the resulting screen state.

    Responsibilities:
    - Issue gateway calls for each intent, strictly in sequence within an intent
    - Capture every call outcome as Ok/Err and dispatch it as an event
    - Log upstream failures; never raise them to the presentation layer
    - Notify listeners with the new snapshot after every transition

    There is no locking across intents. Two intents in flight may interleave
    their events; each event is still applied atomically by ``_dispatch``.
    """

    def __init__(self, catalog_gateway: CatalogGateway) -> None:
        """
        Initialize coordinator with dependencies.

        Args:
            catalog_gateway: Port to the upstream catalog API
        """
        self._gateway = catalog_gateway
        self._state = CoordinatorState()
        self._listeners: list[StateListener] = []

    @property
    def state(self) -> CoordinatorState:
        return self._state

    @property
    def view_mode(self) -> ViewMode:
        return self._state.view_mode

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """Register a render callback; returns a function that unregisters it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _dispatch(self, event: Event) -> CoordinatorState:
        self._state = reduce(self._state, event)
        for listener in list(self._listeners):
            listener(self._state)
        return self._state

    def _log_failure(self, operation: str, result: Err) -> None:
        logger.warning(
            "Upstream call failed",
            extra={
                "operation": operation,
                "error_code": result.error.error_code,
                "reason": result.reason,
                "url": result.error.url,
            },
        )

    # ==========================================================================
    # Catalog list
    # ==========================================================================

    async def initialize(self) -> CoordinatorState:
        """
        Fetch the first catalog page.

        Replaces the catalog with the first page on success. On failure the
        catalog is left as it was (empty on first mount).
        """
        self._dispatch(CatalogRequested())

        result = await attempt(self._gateway.fetch_page())
        if isinstance(result, Err):
            self._log_failure("initialize", result)

        return self._dispatch(CatalogLoaded(result))

    async def load_more(self) -> CoordinatorState:
        """
        Append the next catalog page.

        No-op (no upstream call) when the catalog is exhausted, not yet
        initialized, or a page fetch is already pending.
        """
        state = self._state
        if not state.has_more or state.is_loading_more:
            logger.debug(
                "Skipping load_more",
                extra={"has_more": state.has_more, "pending": state.is_loading_more},
            )
            return state

        cursor = state.cursor
        self._dispatch(PageRequested())

        result = await attempt(self._gateway.fetch_page(cursor))
        if isinstance(result, Err):
            self._log_failure("load_more", result)

        state = self._dispatch(PageLoaded(result))
        if isinstance(result, Ok) and result.value.is_last:
            logger.info("Catalog exhausted", extra={"entries": len(state.catalog)})
        return state

    # ==========================================================================
    # Filtered view
    # ==========================================================================

    def set_query(self, text: str) -> CoordinatorState:
        return self._dispatch(QueryChanged(text))

    async def search(self, query: str) -> CoordinatorState:
        """
        Look up a single entry by name, then fetch its detail.

        Args:
            query: Entry name, any case

        Returns:
            State after the chain settles

        Raises:
            ValidationError: If the query is empty (raised before any call)
        """
        entry_query = EntryQuery(text=query)
        entry_query.validate()

        self._dispatch(SearchRequested())

        result = await attempt(self._gateway.fetch_entry(entry_query.lookup_key))
        if isinstance(result, Err):
            self._log_failure("search", result)
            return self._dispatch(SearchResolved(result))

        self._dispatch(SearchResolved(result))
        return await self.fetch_detail(entry_query.lookup_key)

    async def fetch_detail(self, query: str) -> CoordinatorState:
        """
        Fetch supplementary detail for the active filter result.

        A failure keeps the filter result and leaves the detail absent.

        Raises:
            ValidationError: If the query is empty
        """
        entry_query = EntryQuery(text=query)
        entry_query.validate()

        self._dispatch(DetailRequested())

        result = await attempt(self._gateway.fetch_detail(entry_query.lookup_key))
        if isinstance(result, Err):
            self._log_failure("fetch_detail", result)

        return self._dispatch(DetailResolved(result))

    async def select_entry(self, name: str) -> CoordinatorState:
        """Show a list item in the filtered view, mirroring its name into the query."""
        EntryQuery(text=name).validate()

        self._dispatch(QueryChanged(name))
        return await self.search(name)

    def clear_filter(self) -> CoordinatorState:
        return self._dispatch(FilterCleared())

    def dismiss_notice(self) -> CoordinatorState:
        return self._dispatch(NoticeDismissed())
